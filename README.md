# myshell

`myshell` is a small interactive command shell. It reads a line and splits it on
whitespace, keeping at most four tokens; any further words are dropped. It then
either runs one of its built-in commands or starts the named program with the
remaining tokens as its arguments.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
myshell
```

The shell shows the prompt `MYSHELL $]` and waits for input. Blank lines are
ignored, and the shell stops when its input ends (Ctrl-D at a terminal). If the
line is not a built-in command, the shell runs the first word as a program
found on `PATH`, passes it the other tokens and waits for it to finish:

```
MYSHELL $]ls -l
MYSHELL $]cp a.txt b.txt
```

If the program cannot be started, the shell prints a message such as
`foo: command not found` and shows the prompt again.

### Built-in commands

A built-in is recognised only with exactly the number of words shown below;
otherwise the line is run as an external program.

`count <option> <file>` counts what is in a file:

- `count c a.txt` gives the number of characters (bytes)
- `count w a.txt` gives the number of words. Every space, tab and newline ends a word.
- `count l a.txt` gives the number of lines (newline characters)

`search <option> <pattern> <file>` looks for a pattern one line at a time. Only
lines that end with a newline are searched.

- `search F india a.txt` prints the first line that contains `india`
- `search A india a.txt` prints every line that contains `india`
- `search C india a.txt` prints how many times `india` occurs, overlapping matches included

`typeline <option> <file>` prints lines of a file:

- `typeline a a.txt` prints the whole file
- `typeline 3 a.txt` prints the first 3 lines
- `typeline -2 a.txt` prints the last 2 lines

If a file cannot be opened or an option is not recognised, the shell prints a
message and shows the prompt again.

## Using it from Python

The commands are available as functions in `myshell.commands`: `count`,
`search` and `typeline` return the text the shell would print, and
`count_text` returns a `Counts` value with `characters`, `words` and `lines`.
The file commands raise `CommandError` when they cannot do their work.
`myshell.tokens.tokenize` splits a line the way the shell does, and
`myshell.runner.run_external` runs a program and returns its exit status.
`myshell.shell.Shell` runs the shell loop over any pair of text streams;
`Shell.execute` runs a single line.

```python
import io
from myshell.shell import Shell

out = io.StringIO()
Shell(io.StringIO("count l notes.txt\n"), out).run()
print(out.getvalue())
```

## What it does not do

The shell has no pipes, redirection, quoting, variables, job control, history
or built-in `cd`. Each line is split on whitespace only, so an argument cannot
contain a space.