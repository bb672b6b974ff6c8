# nomadpack

A small library of helpers used by pack tooling. It has no third-party
dependencies.

## Modules

- `nomadpack.logger`: the abstract `Logger` interface (`debug`, `error`,
  `error_with_context`, `info`, `trace`, `warning`), with `FmtLogger`, which
  prints every message to standard output, and `TestLogger(log)`, which hands
  every message to the callable `log`. `error_with_context(err, sub, *args)`
  emits `err: <err>`, then `sub`, then each extra line. `default()` returns a
  `FmtLogger`.
- `nomadpack.title`: `title(s)` capitalises the first letter of each word and
  lower-cases the rest (`"hello world"` becomes `"Hello World"`).
- `nomadpack.signals`: `with_interrupt(parent=None)` is a context manager
  yielding a `threading.Event` that is set when SIGINT arrives or when the
  optional `parent` event is set. On exit the previous SIGINT handler is
  restored and the event is set.
- `nomadpack.walk`: `walk(root, walk_fn)` calls `walk_fn(path, info, error)`
  for every entry under `root`, in sorted order, resolving symlinks and
  walking symlinked directories. The callback may raise `SkipDir` to skip a
  directory; any other exception ends the walk. `read_dir_names` and
  `is_symlink` are the helpers it uses.
- `nomadpack.filesystem`: `copy_file(source, destination, logger)` copies a
  file's contents and permission bits; `copy_dir(source, destination,
  overwrite, logger)` copies a directory tree, skipping symlinked files.
  Without `overwrite` the destination must not exist (`FileExistsError`
  otherwise). `maybe_create_destination_dir(path, *options)` creates a
  directory and its parents if missing; options are `with_file_mode(mode)`
  and `err_on_exists()`. Failures are reported to the logger at debug level
  and then raised.
- `nomadpack.testfixture`: `repo_root()` runs `git rev-parse --show-toplevel`
  to find the repository root, `abs_path(name)` gives the path of a fixture
  under its `fixtures` directory, and `clone(dst, path)` copies a fixture into
  `dst` and returns the copy's path. Failures raise `RuntimeError`.
- `nomadpack.spinner`: `Spinner(chars, delay, color=None, suffix="",
  final_msg="", hide_cursor=False, writer=None, parent=None)` animates frames
  on a background thread, `delay` seconds apart, writing to `writer`
  (standard output by default). It has `start`, `stop`, `restart`,
  `reverse`, `color(*names)`, `update_speed`, `update_char_set`, `lock`,
  `unlock` and `active`, plus `prefix`, `pre_update` and `post_update`
  attributes. Colours apply only when the writer is a terminal and
  `NO_COLOR` is unset. Setting a colour, in the constructor or through
  `color`, restarts the spinner. An unknown colour raises
  `InvalidColorError`. `CHAR_SETS` holds ready-made frame sets;
  `valid_color(name)` and `generate_number_sequence(length)` are helpers.

## What it does not do

The package does not load, validate or render packs, parse variable files,
or talk to a cluster, and it has no command-line program. It provides only
the helpers listed above.

## Install

```
pip install .
```

## Example

```python
from nomadpack.filesystem import copy_dir
from nomadpack.logger import default

copy_dir("packs/example", "out/example", False, default())
```

```python
import io
import time
from nomadpack.spinner import Spinner

out = io.StringIO()
spinner = Spinner(["|", "/", "-", "\\"], 0.1, writer=out, final_msg="done\n")
spinner.start()
time.sleep(0.5)
spinner.stop()
```

## Tests

```
pip install .[test]
pytest
```