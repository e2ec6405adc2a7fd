from linecmd import Command, ControlSignal


class Ping(Command):
    name = 'ping'

    def execute(self, output, args):
        output.writeln("pong")
        return ControlSignal.CONTINUE
