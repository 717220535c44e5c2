# watchcmd

Run a shell command over and over at a fixed interval, the way `watch` does.

## Installation

```
pip install .
```

To install what the tests need as well:

```
pip install ".[test]"
```

## Usage

```
watch [options] command
```

`command` goes to the system shell. On POSIX systems that is `sh -c`, and on
Windows it is `%COMSPEC% /c` (or `cmd.exe /c` when `COMSPEC` is not set). The
command's standard output and standard error go straight to the terminal.

Between runs the program waits for the interval given with `-n SECONDS` or
`--interval SECONDS`. You can also set the interval with the `WATCH_INTERVAL`
environment variable. If neither is given, the interval is 2 seconds.

```
watch -n 0.5 "date"
watch --interval 1,5 "ls -l"
```

The interval is a number of seconds. It may have a fractional part, and either
`.` or `,` can separate the two parts. Only the first nine fractional digits
count. Any digits after those are checked but otherwise ignored. An interval
with a fractional part is never shorter than 0.1 seconds. A whole number is used
as given. If the interval cannot be parsed, the program prints this to standard
error and exits with status 1:

```
watch: failed to parse argument: '<value>': Invalid argument
```

The loop runs until the command exits with a non-zero status. When that happens,
the program prints `watch: command failed: exit status: N` (or `signal: N` when
a signal ended the command) to standard error and stops. Its own exit status is
then 0.

`--version` prints the version. An argument error prints the usage line and
exits with status 1.

## What it does not do

The program does not clear the screen or draw a header. It does not highlight
differences between runs, beep, or react to changes in the output.

These options are accepted but change nothing: `-b/--beep`, `-c/--color`,
`-C/--no-color`, `-d/--differences`, `-e/--errexit`, `-g/--chgexit`,
`-q/--equexit`, `-p/--precise`, `-r/--no-rerun`, `-t/--no-title`,
`-w/--no-wrap` and `-x/--exec`. Each one expects a value after it, for example
`-q 3`.

## Library use

```python
from watchcmd.interval import parse_interval
from watchcmd.cli import run_watch, shell_command

interval = parse_interval("1.5")   # Decimal('1.500000000')
print(shell_command("uptime"))     # ['sh', '-c', 'uptime'] on POSIX
code = run_watch("uptime", interval)
```

- `parse_interval(text)` returns the interval in seconds as a `decimal.Decimal`.
  It raises `ValueError` when the input is invalid.
- `run_watch(command, interval)` runs the command until a run fails. It then
  returns that run's return code, which is negative when a signal ended the
  command.
- `build_parser()` returns the `argparse` parser that the command uses.
- `main(argv=None)` parses the arguments and runs the loop. It returns the exit
  status.
- `WatchError` is raised inside `main` when the interval cannot be parsed.