"""A terminal spinner used as a progress indicator."""

from __future__ import annotations

import os
import sys
import threading
from typing import Callable, Iterable, Optional, TextIO

_CLOCK_ONE_OCLOCK = 0x1F550
_CLOCK_ONE_THIRTY = 0x1F55C

_IS_WINDOWS = sys.platform.startswith("win")

CHAR_SETS: dict[int, list[str]] = {
    0: ["←", "↖", "↑", "↗", "→", "↘", "↓", "↙"],
    1: ["▁", "▃", "▄", "▅", "▆", "▇", "█", "▇", "▆", "▅", "▄", "▃", "▁"],
    2: ["▖", "▘", "▝", "▗"],
    3: ["┤", "┘", "┴", "└", "├", "┌", "┬", "┐"],
    4: ["◢", "◣", "◤", "◥"],
    5: ["◰", "◳", "◲", "◱"],
    6: ["◴", "◷", "◶", "◵"],
    7: ["◐", "◓", "◑", "◒"],
    8: [".", "o", "O", "@", "*"],
    9: ["|", "/", "-", "\\"],
    10: ["◡◡", "⊙⊙", "◠◠"],
    11: ["⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"],
    12: [">))'>", " >))'>", "  >))'>", "   >))'>", "    >))'>", "   <'((<", "  <'((<", " <'((<"],
    13: ["⠁", "⠂", "⠄", "⡀", "⢀", "⠠", "⠐", "⠈"],
    14: ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"],
    15: list("abcdefghijklmnopqrstuvwxyz"),
    16: ["▉", "▊", "▋", "▌", "▍", "▎", "▏", "▎", "▍", "▌", "▋", "▊", "▉"],
    17: ["■", "□", "▪", "▫"],
    18: ["←", "↑", "→", "↓"],
    19: ["╫", "╪"],
    20: ["⇐", "⇖", "⇑", "⇗", "⇒", "⇘", "⇓", "⇙"],
    21: ["⠁", "⠁", "⠉", "⠙", "⠚", "⠒", "⠂", "⠂", "⠒", "⠲", "⠴", "⠤", "⠄", "⠄", "⠤", "⠠",
         "⠠", "⠤", "⠦", "⠖", "⠒", "⠐", "⠐", "⠒", "⠓", "⠋", "⠉", "⠈", "⠈"],
    22: ["⠈", "⠉", "⠋", "⠓", "⠒", "⠐", "⠐", "⠒", "⠖", "⠦", "⠤", "⠠", "⠠", "⠤", "⠦", "⠖",
         "⠒", "⠐", "⠐", "⠒", "⠓", "⠋", "⠉", "⠈"],
    23: ["⠁", "⠉", "⠙", "⠚", "⠒", "⠂", "⠂", "⠒", "⠲", "⠴", "⠤", "⠄", "⠄", "⠤", "⠴", "⠲",
         "⠒", "⠂", "⠂", "⠒", "⠚", "⠙", "⠉", "⠁"],
    24: ["⠋", "⠙", "⠚", "⠒", "⠂", "⠂", "⠒", "⠲", "⠴", "⠦", "⠖", "⠒", "⠐", "⠐", "⠒", "⠓", "⠋"],
    25: list("ｦｧｨｩｪｫｬｭｮｯｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝ"),
    26: [".", "..", "..."],
    27: ["▁", "▂", "▃", "▄", "▅", "▆", "▇", "█", "▉", "▊", "▋", "▌", "▍", "▎", "▏", "▏", "▎",
         "▍", "▌", "▋", "▊", "▉", "█", "▇", "▆", "▅", "▄", "▃", "▂", "▁"],
    28: [".", "o", "O", "°", "O", "o", "."],
    29: ["+", "x"],
    30: ["v", "<", "^", ">"],
    31: [">>--->", " >>--->", "  >>--->", "   >>--->", "    >>--->", "    <---<<", "   <---<<",
         "  <---<<", " <---<<", "<---<<"],
    32: ["|", "||", "|||", "||||", "|||||", "|||||||", "||||||||", "|||||||", "||||||", "|||||",
         "||||", "|||", "||", "|"],
    33: ["[          ]", "[=         ]", "[==        ]", "[===       ]", "[====      ]",
         "[=====     ]", "[======    ]", "[=======   ]", "[========  ]", "[========= ]",
         "[==========]"],
    34: ["(*---------)", "(-*--------)", "(--*-------)", "(---*------)", "(----*-----)",
         "(-----*----)", "(------*---)", "(-------*--)", "(--------*-)", "(---------*)"],
    35: ["█▒▒▒▒▒▒▒▒▒", "███▒▒▒▒▒▒▒", "█████▒▒▒▒▒", "███████▒▒▒", "██████████"],
    36: ["[                    ]", "[=>                  ]", "[===>                ]",
         "[=====>              ]", "[======>             ]", "[========>           ]",
         "[==========>         ]", "[============>       ]", "[==============>     ]",
         "[================>   ]", "[==================> ]", "[===================>]"],
    39: ["🌍", "🌎", "🌏"],
    40: ["◜", "◝", "◞", "◟"],
    41: ["⬒", "⬔", "⬓", "⬕"],
    42: ["⬖", "⬘", "⬗", "⬙"],
    43: ["[>>>          >]", "[]>>>>        []", "[]  >>>>      []", "[]    >>>>    []",
         "[]      >>>>  []", "[]        >>>>[]", "[>>          >>]"],
    44: ["♠", "♣", "♥", "♦"],
    45: ["➞", "➟", "➠", "➡", "➠", "➟"],
    46: ["  |  ", " \\   ", "_    ", " \\   ", "  |  ", "   / ", "    _", "   / "],
    47: ["  . . . .", ".   . . .", ". .   . .", ". . .   .", ". . . .  ", ". . . . ."],
    48: [" |     ", "  /    ", "   _   ", "    \\  ", "     | ", "    \\  ", "   _   ", "  /    "],
    49: ["⎺", "⎻", "⎼", "⎽", "⎼", "⎻"],
    50: ["▹▹▹▹▹", "▸▹▹▹▹", "▹▸▹▹▹", "▹▹▸▹▹", "▹▹▹▸▹", "▹▹▹▹▸"],
    51: ["[    ]", "[   =]", "[  ==]", "[ ===]", "[====]", "[=== ]", "[==  ]", "[=   ]"],
    52: ["( ●    )", "(  ●   )", "(   ●  )", "(    ● )", "(     ●)", "(    ● )", "(   ●  )",
         "(  ●   )", "( ●    )"],
    53: ["✶", "✸", "✹", "✺", "✹", "✷"],
    54: ["▐|\\____________▌", "▐_|\\___________▌", "▐__|\\__________▌", "▐___|\\_________▌",
         "▐____|\\________▌", "▐_____|\\_______▌", "▐______|\\______▌", "▐_______|\\_____▌",
         "▐________|\\____▌", "▐_________|\\___▌", "▐__________|\\__▌", "▐___________|\\_▌",
         "▐____________|\\▌", "▐____________/|▌", "▐___________/|_▌", "▐__________/|__▌",
         "▐_________/|___▌", "▐________/|____▌", "▐_______/|_____▌", "▐______/|______▌",
         "▐_____/|_______▌", "▐____/|________▌", "▐___/|_________▌", "▐__/|__________▌",
         "▐_/|___________▌", "▐/|____________▌"],
    55: ["▐⠂       ▌", "▐⠈       ▌", "▐ ⠂      ▌", "▐ ⠠      ▌", "▐  ⡀     ▌", "▐  ⠠     ▌",
         "▐   ⠂    ▌", "▐   ⠈    ▌", "▐    ⠂   ▌", "▐    ⠠   ▌", "▐     ⡀  ▌", "▐     ⠠  ▌",
         "▐      ⠂ ▌", "▐      ⠈ ▌", "▐       ⠂▌", "▐       ⠠▌", "▐       ⡀▌", "▐      ⠠ ▌",
         "▐      ⠂ ▌", "▐     ⠈  ▌", "▐     ⠂  ▌", "▐    ⠠   ▌", "▐    ⡀   ▌", "▐   ⠠    ▌",
         "▐   ⠂    ▌", "▐  ⠈     ▌", "▐  ⠂     ▌", "▐ ⠠      ▌", "▐ ⡀      ▌", "▐⠠       ▌"],
    56: ["¿", "?"],
    57: ["⢹", "⢺", "⢼", "⣸", "⣇", "⡧", "⡗", "⡏"],
    58: ["⢄", "⢂", "⢁", "⡁", "⡈", "⡐", "⡠"],
    59: [".  ", ".. ", "...", " ..", "  .", "   "],
    60: [".", "o", "O", "°", "O", "o", "."],
    61: ["▓", "▒", "░"],
    62: ["▌", "▀", "▐", "▄"],
    63: ["⊶", "⊷"],
    64: ["▪", "▫"],
    65: ["□", "■"],
    66: ["▮", "▯"],
    67: ["-", "=", "≡"],
    68: ["d", "q", "p", "b"],
    69: ["∙∙∙", "●∙∙", "∙●∙", "∙∙●", "∙∙∙"],
    70: ["🌑 ", "🌒 ", "🌓 ", "🌔 ", "🌕 ", "🌖 ", "🌗 ", "🌘 "],
    71: ["☗", "☖"],
    72: ["⧇", "⧆"],
    73: ["◉", "◎"],
    74: ["㊂", "㊀", "㊁"],
    75: ["⦾", "⦿"],
    76: ["ဝ", "၀"],
    77: ["▌", "▀", "▐▄"],
}

CHAR_SETS[37] = [chr(_CLOCK_ONE_OCLOCK + i) for i in range(12)]
CHAR_SETS[38] = [
    clock
    for i in range(12)
    for clock in (chr(_CLOCK_ONE_OCLOCK + i), chr(_CLOCK_ONE_THIRTY + i))
]

_BASE_ATTRIBUTES = {
    "reset": 0,
    "bold": 1,
    "faint": 2,
    "italic": 3,
    "underline": 4,
    "blinkslow": 5,
    "blinkrapid": 6,
    "reversevideo": 7,
    "concealed": 8,
    "crossedout": 9,
}

_COLOR_NAMES = ("Black", "Red", "Green", "Yellow", "Blue", "Magenta", "Cyan", "White")


def _build_attribute_map() -> dict[str, int]:
    attributes = dict(_BASE_ATTRIBUTES)
    for offset, name in enumerate(_COLOR_NAMES):
        attributes[name.lower()] = 30 + offset
        attributes[f"fg{name}"] = 30 + offset
        attributes[f"fgHi{name}"] = 90 + offset
        attributes[f"bg{name}"] = 40 + offset
        attributes[f"bgHi{name}"] = 100 + offset
    return attributes


COLOR_ATTRIBUTES: dict[str, int] = _build_attribute_map()


class InvalidColorError(ValueError):
    """Raised when a colour name is not one of the supported ones."""

    def __init__(self, name: str = "") -> None:
        super().__init__("invalid color")
        self.name = name


def valid_color(name: str) -> bool:
    """Report whether ``name`` is a supported colour or attribute."""
    return name in COLOR_ATTRIBUTES


def generate_number_sequence(length: int) -> list[str]:
    """Return the numbers ``0`` to ``length - 1`` as strings."""
    if length < 0:
        raise ValueError("length must not be negative")
    return [str(i) for i in range(length)]


def _color_enabled(writer: TextIO) -> bool:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(writer, "isatty", None)
    try:
        return bool(isatty and isatty())
    except (OSError, ValueError):
        return False


class Spinner:
    """An animated indicator written to a text stream from a background thread.

    ``delay`` is the time between frames in seconds. ``parent`` is an optional
    event; once it is set the animation ends and :meth:`stop` no longer waits.
    Giving ``color`` applies it through :meth:`color`, which (re)starts the
    spinner.
    """

    def __init__(
        self,
        chars: Iterable[str],
        delay: float,
        color: Optional[str] = None,
        suffix: str = "",
        final_msg: str = "",
        hide_cursor: bool = False,
        writer: Optional[TextIO] = None,
        parent: Optional[threading.Event] = None,
    ) -> None:
        self._mu = threading.Lock()
        self._parent = parent
        self._chars = list(chars)
        self._attributes: tuple[int, ...] = (COLOR_ATTRIBUTES["fgWhite"],)
        self._last_output = ""
        self._active = False
        self._cancel = threading.Event()
        self._done = threading.Event()
        self._done.set()
        self.delay = delay
        self.prefix = ""
        self.suffix = suffix
        self.final_msg = final_msg
        self.hide_cursor = hide_cursor
        self.writer: TextIO = writer if writer is not None else sys.stdout
        self.pre_update: Optional[Callable[[Spinner], None]] = None
        self.post_update: Optional[Callable[[Spinner], None]] = None
        if color is not None:
            self.color(color)

    def active(self) -> bool:
        """Report whether the spinner is running."""
        return self._active

    def start(self) -> None:
        """Start the animation; does nothing if it is already running."""
        with self._mu:
            if self._active:
                return
            if self.hide_cursor and not _IS_WINDOWS:
                sys.stdout.write("\033[?25l")
                sys.stdout.flush()
            self._active = True
            self._cancel = threading.Event()
            self._done = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(self._cancel, self._done, self.delay),
                daemon=True,
            )
        thread.start()

    def _run(self, cancel: threading.Event, done: threading.Event, delay: float) -> None:
        index = 0
        try:
            while True:
                if cancel.wait(delay):
                    return
                if self._parent is not None and self._parent.is_set():
                    return
                with self._mu:
                    if not self._active or cancel.is_set():
                        return
                    chars = self._chars
                    if not chars:
                        continue
                    if index >= len(chars):
                        index = 0
                    frame = chars[index]
                    index += 1

                    self._erase()
                    if self.pre_update is not None:
                        self.pre_update(self)

                    if _IS_WINDOWS and self.writer is sys.stderr:
                        painted = frame
                    else:
                        painted = self._paint(frame)
                    self.writer.write(f"\r{self.prefix}{painted}{self.suffix} ")
                    self._flush()
                    self._last_output = f"\r{self.prefix}{frame}{self.suffix} "

                    if self.post_update is not None:
                        self.post_update(self)
        finally:
            done.set()

    def stop(self) -> None:
        """Stop the animation, erase it and write the final message."""
        with self._mu:
            if not self._active:
                return
            self._active = False
            self._cancel.set()
            done = self._done

        if self._parent is None:
            done.wait()
        else:
            while not done.wait(0.05) and not self._parent.is_set():
                pass

        with self._mu:
            if self.hide_cursor and not _IS_WINDOWS:
                sys.stdout.write("\033[?25h")
                sys.stdout.flush()
            self._erase()
            if self.final_msg:
                self.writer.write(self.final_msg)
            self._flush()

    def restart(self) -> None:
        """Stop and start the animation."""
        self.stop()
        self.start()

    def reverse(self) -> None:
        """Reverse the order of the frames."""
        with self._mu:
            self._chars.reverse()

    def color(self, *args: str) -> None:
        """Set the colours and attributes of the frames, then restart.

        Raises :class:`InvalidColorError` for an unknown name.
        """
        attributes = []
        for name in args:
            if not valid_color(name):
                raise InvalidColorError(name)
            attributes.append(COLOR_ATTRIBUTES[name])
        with self._mu:
            self._attributes = tuple(attributes)
        self.restart()

    def update_speed(self, delay: float) -> None:
        """Set the delay between frames used by the next start."""
        with self._mu:
            self.delay = delay

    def update_char_set(self, chars: Iterable[str]) -> None:
        """Replace the frames."""
        with self._mu:
            self._chars = list(chars)

    def lock(self) -> None:
        """Acquire the spinner's lock, pausing the animation."""
        self._mu.acquire()

    def unlock(self) -> None:
        """Release the spinner's lock."""
        self._mu.release()

    def _paint(self, text: str) -> str:
        if not _color_enabled(self.writer):
            return text
        codes = ";".join(str(code) for code in self._attributes)
        return f"\x1b[{codes}m{text}\x1b[0m"

    def _flush(self) -> None:
        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()

    def _erase(self) -> None:
        # Caller holds the lock.
        n = len(self._last_output)
        if _IS_WINDOWS:
            self.writer.write("\r" + " " * n + "\r")
            self._last_output = ""
            return
        for code in ("\b", "\127", "\b", "\033[K"):
            self.writer.write(code * n)
        self.writer.write("\r\033[K")
        self._last_output = ""