from linecmd import ControlSignal


class CountingSource:
    """Line source that remembers how many times it was read."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.reads = 0

    def readline(self):
        self.reads += 1
        if self.lines:
            return self.lines.pop(0)
        return ''


class FailingSource:
    def readline(self):
        raise OSError("failed on read")


class FailingSink:
    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        pass


class FlushFailingSink:
    def __init__(self):
        self.written = []

    def write(self, data):
        self.written.append(data)

    def flush(self):
        raise OSError("failed on flush")


class Greeting:
    """Handler class that does not derive from Command."""

    def __init__(self):
        self.calls = []

    def execute(self, output, args):
        self.calls.append(list(args))
        output.writeln("Hello there!")
        return ControlSignal.CONTINUE
