import io

from linecmd import ControlSignal, Output
from linecmd.app import build_shell, config_from_env, greet, main


class TestConfigFromEnv():
    def test_defaults(self):
        config = config_from_env({})
        assert config.prompt == "(cmd) "
        assert config.intro is None

    def test_overrides(self):
        config = config_from_env({"LINECMD_PROMPT": "demo> ", "LINECMD_INTRO": "Hi."})
        assert config.prompt == "demo> "
        assert config.intro == "Hi."

    def test_empty_prompt_allowed(self):
        assert config_from_env({"LINECMD_PROMPT": ""}).prompt == ""


class TestTheDemo():
    def test_greet(self):
        buf = io.StringIO()
        assert greet(Output(buf), ["Ada", "Lovelace"]) is ControlSignal.CONTINUE
        greet(Output(buf), [])
        assert buf.getvalue() == "Hello, Ada Lovelace!\nHello!\n"

    def test_session(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        out = io.StringIO()
        env = {"LINECMD_PROMPT": "", "LINECMD_FAREWELL": "See you."}
        shell = build_shell(["greet Bob\n", "touch notes.txt\n", "?\n", "exit\n", "greet\n"], out, env)

        shell.run()

        lines = out.getvalue().splitlines()
        assert lines[0] == "Hello, Bob!"
        assert lines[1] == "Created file: notes.txt"
        assert lines[2] == "Commands:"
        assert lines[-1] == "See you."
        assert (tmp_path / "notes.txt").exists()
        assert "Say hello. Usage: greet [NAME...]" in out.getvalue()

    def test_main_reads_dotenv(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        for var in ("LINECMD_PROMPT", "LINECMD_INTRO", "LINECMD_FAREWELL"):
            # setenv first so whatever .env loads is removed again afterwards
            monkeypatch.setenv(var, "")
            monkeypatch.delenv(var)
        (tmp_path / ".env").write_text("LINECMD_PROMPT=\nLINECMD_INTRO=Welcome to the demo\n")
        monkeypatch.setattr("sys.stdin", io.StringIO("greet\nquit\n"))

        assert main() == 0

        captured = capsys.readouterr().out
        assert captured == "Welcome to the demo\nHello!\n"
