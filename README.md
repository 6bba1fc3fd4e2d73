# menucli

Building blocks for interactive command line interfaces. It converts
arguments, edits lines, decodes keys, schedules tasks, stores history and
handles telnet negotiation.

The package has no runtime dependencies and needs Python 3.10 or later.

## Modules

### `menucli.fromstring`

`from_string(text, target)` converts one command argument into a typed value.
If the conversion fails it raises `BadConversion`, which is a subclass of
`ValueError`.

The `target` can be one of these:

- A Python type:
  - `str` returns the text as it is.
  - `None` returns `None`.
  - `bool` accepts `"true"`, `"false"`, `1` and `0`.
  - `int` gives an integer with no range limit.
  - `float` gives a floating-point number.
- The name of a C numeric type, such as `"int"`, `"unsigned short"`,
  `"signed char"`, `"long long"`, `"float"` or `"double"`:
  - Integer targets reject values outside their range. For example, `"-42"`
    is rejected for an unsigned target.
  - Floating-point targets reject whitespace and values that overflow.
- `"char"`, which accepts exactly one character.
- Any other callable. It is called with the stripped text, and a `ValueError`
  or `TypeError` it raises becomes `BadConversion`.

An unknown target name raises `TypeError`.

### `menucli.commonprefix`

`common_prefix(strings)` returns the longest prefix that every string shares.
It raises `ValueError` if it is given no strings.

### `menucli.colors`

- ANSI code enums: `Style`, `Fg`, `Bg`, `FgB` and `BgB`.
- `sgr(code)` returns the escape sequence for a code.
- `supports_color(environ)` checks whether `TERM` names a colour-capable
  terminal type.
- A global switch turns colours on and off: `set_color()`, `set_no_color()`
  and `color_enabled()`. Colours start off.
- `before_prompt()`, `after_prompt()`, `before_input()` and `after_input()`
  return decoration sequences:
  - The prompt is bold green.
  - Input is bright gray.
  - The after-functions return a reset.
  - All four return empty strings while colours are off.

### `menucli.inputdevice`

- `KeyType` lists the kinds of key an input device can report.
- `InputDevice(scheduler)` posts each `notify(key, char)` to the scheduler.
  The handler set with `register(handler)` then receives `(key, char)` in the
  thread that drives the scheduler.

### `menucli.loopscheduler`

`LoopScheduler` is a thread-safe task queue:

- `post(task)` can be called from any thread.
- `exec_one()` waits for one task and runs it. It returns `False` once the
  queue is stopped.
- `poll_one()` runs a task only if one is ready.
- `run()` loops until `stop()` is called.
- `stopped()` reports whether the queue has been stopped.

An exception raised by a task comes out of the call that ran it. Used as a
context manager, the scheduler stops on exit.

### `menucli.terminal`

`Terminal(out)` keeps the line being edited and writes the echo and
cursor-movement output to `out`.

`keypressed(key, char)` applies a key and returns `(Symbol, text)`:

- `Symbol.COMMAND` together with the finished line when Return is pressed.
- `Symbol.UP`, `Symbol.DOWN`, `Symbol.TAB` or `Symbol.EOF` for keys the caller
  must act on.
- `Symbol.NOTHING` for keys that only edit the line.

`set_line(new_line)` replaces the current line, for example with a history
entry. `get_line()` returns the current line and `reset_cursor()` sets the
cursor back to 0.

### `menucli.history`

- `VolatileHistoryStorage(size=1000)` keeps history in memory.
- `FileHistoryStorage(file_name, size=1000)` keeps history in a text file, one
  command per line. A missing file reads as empty history.

Both provide `store(commands)`, `commands()` and `clear()`. They keep only
the newest `size` entries.

### `menucli.keyboard`

`decode_key(getchar)` reads bytes from a callable and returns one
`(KeyType, char)`:

- Escape sequences map to arrows, Home, End and Delete.
- `EOF` and Ctrl-D map to `KeyType.EOF`.
- Byte 10 maps to Return.

`Keyboard(scheduler, fd=None)` reads keys from a descriptor, which is stdin by
default, on a background thread. Each key is posted to the scheduler.

While the keyboard is started, a terminal descriptor is switched to
non-canonical mode without echo. `stop()` restores the previous settings.
Starting and stopping also happen when the keyboard is used as a context
manager. The keyboard relies on `select` on a pipe, so it works on POSIX
systems.

### `menucli.telnet`

`TelnetSession(send)` handles the server side of option negotiation. It does
no network I/O of its own:

- You feed client bytes to `receive(data)`.
- Replies go out through `send`.
- Plain data bytes are passed to `output(byte)`, which discards them in the
  base class.

`greeting()` returns the bytes to send on connection, which request line mode
and offer echo. `encode(text)` turns `\n` into `\r\n`.

`TelnetKeyDecoder(scheduler, send)` is a telnet session that is also an
`InputDevice`. It decodes the client's data bytes into key events, in the same
way as a local keyboard.

## Example

```python
import io

from menucli.inputdevice import KeyType
from menucli.loopscheduler import LoopScheduler
from menucli.terminal import Symbol, Terminal

out = io.StringIO()
term = Terminal(out)
for ch in "hello":
    term.keypressed(KeyType.ASCII, ch)
symbol, line = term.keypressed(KeyType.RET, " ")
assert symbol is Symbol.COMMAND and line == "hello"

scheduler = LoopScheduler()
scheduler.post(lambda: print("ran"))
scheduler.exec_one()
```

## What the package does not do

The package has none of the following:

- A menu or command tree.
- Command dispatch, or a help or exit command.
- A session object that ties the terminal, the history and the scheduler
  together.
- A network server. The telnet classes only handle bytes, so opening sockets
  and passing data to them is left to the application.
- A command to run.

## Tests

```
pip install -e .[test]
pytest
```