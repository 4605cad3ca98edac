import io
import sys

from myshell.shell import PROMPT, Shell, main


def make_shell(text=""):
    out = io.StringIO()
    return Shell(io.StringIO(text), out), out


def test_count_characters(tmp_path):
    data = "hello world\nbye\n"
    path = tmp_path / "a.txt"
    path.write_text(data)
    shell, out = make_shell()
    shell.execute(f"count c {path}")
    assert out.getvalue() == f"Number Of Character  :{len(data)} \n"


def test_count_lines(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("one\ntwo\nthree\n")
    shell, out = make_shell()
    shell.execute(f"count l {path}\n")
    assert out.getvalue() == "Number Of Lines   : 3 \n"


def test_count_invalid_option_reported(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("x\n")
    shell, out = make_shell()
    shell.execute(f"count z {path}")
    assert out.getvalue() == "Invalid Option Is Given For Count Command !!!\n"


def test_count_missing_file_reported(tmp_path):
    path = tmp_path / "missing.txt"
    shell, out = make_shell()
    shell.execute(f"count c {path}")
    assert out.getvalue() == f"Unable To Open File  {path} !!\n"


def test_typeline_first_lines(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("one\ntwo\nthree\n")
    shell, out = make_shell()
    shell.execute(f"typeline 2 {path}")
    assert out.getvalue() == f"Displaying First 2 Lines From {path} \none\ntwo\n"


def test_typeline_last_lines(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("one\ntwo\nthree\n")
    shell, out = make_shell()
    shell.execute(f"typeline -1 {path}")
    assert out.getvalue() == "three\n"


def test_search_count(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("india india\nnothing\nindia\n")
    shell, out = make_shell()
    shell.execute(f"search C india {path}")
    assert out.getvalue() == "india Is Occures 3 times  \n"


def test_extra_tokens_are_ignored(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("india\n")
    shell, out = make_shell()
    shell.execute(f"search F india {path} extra")
    assert out.getvalue() == "First Occurance Line : india\n \n"


def test_blank_line_does_nothing():
    shell, out = make_shell()
    shell.execute("   \n")
    assert out.getvalue() == ""


def test_missing_program_reported():
    shell, out = make_shell()
    shell.execute("no-such-program-xyz arg")
    assert "no-such-program-xyz" in out.getvalue()
    assert out.getvalue().endswith("\n")


def test_run_prompts_until_end_of_input(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("a b\n")
    shell, out = make_shell(f"count w {path}\n\n")
    shell.run()
    text = out.getvalue()
    assert text.count(PROMPT) == 3
    assert "Number Of Words    : 2 \n" in text
    assert text.endswith(PROMPT)


def test_main_runs_on_standard_streams(tmp_path, monkeypatch, capsys):
    path = tmp_path / "a.txt"
    path.write_text("x\ny\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"count l {path}\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured == f"{PROMPT}Number Of Lines   : 2 \n{PROMPT}"