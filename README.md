# gitlogue

The building blocks for a terminal Git history screensaver: built-in colour
themes, syntax highlighting of source files, and a paragraph widget that wraps
at character boundaries and can keep one selected line centred.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Themes

Fifteen themes are built in. Load one by name:

```python
from gitlogue.theme import available_themes, default_theme, load_theme, UnknownThemeError

print(available_themes())        # ['ayu-dark', 'catppuccin', ..., 'tokyo-night']
theme = load_theme("dracula")
plain = theme.with_transparent_background()

try:
    load_theme("no-such-theme")
except UnknownThemeError as exc:
    print(exc)                   # names the unknown theme and lists the available ones
```

`default_theme()` returns the `tokyo-night` theme. Every theme is a frozen
`Theme` (in `gitlogue.colors`) made of `Color` values. A `Color` is either an
RGB triple with channels 0 to 255 or `Color.RESET`, the terminal's default;
`Color.is_reset()` tells the two apart and `Color.rgb` gives the triple.
`with_transparent_background()` returns a copy whose two background colours
are `Color.RESET`, so the terminal's own background shows through.

The individual theme functions (`dracula()`, `nord()` and so on) live in
`gitlogue.palettes_a_to_m` and `gitlogue.palettes_n_to_z`.

## Syntax highlighting

The language is picked from a file's extension (Rust, TypeScript, JavaScript,
Python, shell, Go, Ruby, Swift, Kotlin, Java, PHP, C#, C++, C, Haskell, Dart,
Scala, Clojure, Zig, Elixir, Erlang, HTML, CSS, JSON, Markdown, YAML and XML);
the tokens themselves come from Pygments lexers.

```python
from gitlogue.highlighter import Highlighter
from gitlogue.theme import default_theme

source = 'fn main() {\n    let x = 42;\n}\n'
highlighter = Highlighter()
if highlighter.set_language_from_path("main.rs"):
    theme = default_theme()
    for span in highlighter.highlight(source):
        print(span.start, span.end, span.token_type, span.token_type.color(theme))
```

Each `HighlightSpan` holds character offsets `[start, end)` into the source
string and a `TokenType`; spans come back sorted by their start. The last
result is remembered, so highlighting the same text again is cheap.
`Highlighter.language` names the current language.

An unsupported extension makes `set_language_from_path` return `False` and
clears the language, after which `highlight` returns no spans.
`language_for_path` and `lexer_for_path` in `gitlogue.languages` expose the
extension lookup on its own, and `token_type_for_capture` maps names such as
`"keyword.function"` to a `TokenType` (or `None` for names that are skipped).

## Selectable paragraph

`gitlogue.selectable_paragraph.SelectableParagraph` draws `Line`s of styled
`Span`s into a `Buffer`; these, together with `Style`, `Padding`, `Rect`,
`Cell` and a bordered, titled `Block`, are in `gitlogue.buffer`.

```python
from gitlogue.buffer import Buffer, Line, Rect, Span, Style
from gitlogue.colors import Color
from gitlogue.selectable_paragraph import SelectableParagraph

area = Rect(0, 0, 20, 5)
buf = Buffer(area)
paragraph = SelectableParagraph(
    lines=[Line([Span("first line")]), Line([Span("second line", Style(fg=Color(200, 200, 200)))])],
    selected_line=1,
    selected_style=Style(bg=Color(40, 40, 40)),
    dim_max_distance=3,
)
paragraph.render(area, buf)
print(buf.row_text(1))
```

Long lines wrap at character boundaries, using display width so wide
characters count as two cells. The selected line takes the selected style
(a span's own colours win), is kept near the middle of the view when the
lines do not all fit, and with `dim_max_distance` set the other lines fade
towards `dim_min_opacity` with distance. `wrap_line` and `blend` are
available on their own too.

## What this package does not do

It has no command to run and no full-screen display: it does not read Git
repositories, replay commits, or draw the file tree, editor, terminal and
status panes of a screensaver. It supplies the themes, highlighting and
paragraph drawing that such a program is built from.