from typing import BinaryIO


class Terminal():
    ''' Line-buffered input and byte output for the machine '''

    def __init__(self, instream: BinaryIO, outstream: BinaryIO):
        self.instream = instream
        self.outstream = outstream

    def read_line(self) -> bytes:
        ''' One line including its newline, empty at end of stream '''
        # Pending output goes out before blocking on input
        self.flush()
        return self.instream.readline()

    def write(self, byte: int):
        self.outstream.write(bytes([byte]))

        if byte == ord('\n'):
            self.flush()

    def flush(self):
        self.outstream.flush()
