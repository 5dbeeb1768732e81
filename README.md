# kitbag

A collection of small command-line tools and helper classes.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Command-line tools

### pcfont: inspect a PCF bitmap font

    pcfont [-f N] [-U CODE]

This opens a PCF font and prints a summary of its table of contents, including the
font properties. It then prints the glyph for character `CODE` as a text bitmap,
followed by the glyph's metrics and its name. `-f N` picks one of five built-in
WenQuanYi font paths under `/usr/share/fonts/wenquanyi/`. `N` runs from 0 to 4, a
larger number means 4, and 4 is the default. `-U` takes a decimal number or a
hexadecimal number that starts with `0x`. A malformed number counts as 0. The exit
status is 1 when the font cannot be opened or the character has no glyph.

### large: find the largest files in a directory tree

    large <path>

This walks `<path>` and lists the ten largest regular files it finds, largest first.
Symbolic links are followed to their targets. Sizes over 1024 bytes are shown in K,
and sizes over 1 MiB in M. An unreadable directory or file stops the walk with an
error message, and the files found so far are still listed.

### zpipe: zlib compression filter

    zpipe < source > dest.z
    zpipe -d < dest.z > source

Without arguments it compresses stdin to stdout. With `-d` it decompresses. Invalid
or truncated compressed data is reported on stderr, with exit status 1.

### upcase: upper-case arguments in threads

    upcase [-s STACK_SIZE] word...

This prints the current locale name and then starts one thread for each argument.
Each thread upper-cases the ASCII letters of its argument. After all threads have
been joined, the results are printed in argument order. `-s` sets the thread stack
size in bytes and accepts the `0x` and `0o` prefixes.

### netstat-report: list network interfaces

    netstat-report

This prints every address of every network interface with its address family. IPv4
and IPv6 addresses are shown numerically. For link-layer entries it also prints the
packets and bytes sent and received.

### chemical: path puzzle

    chemical <file>
    chemical -G N

Each record in `<file>` is `M<seq> <src> <dst> <weight>`, separated by whitespace.
The tool prints the paths sorted by weight and then chooses a selection of them. It
takes the first path out of each source node and adds the first path into each
destination that is still missing. It prints the selection and its total weight, then
checks whether every node can reach all the others. It prints `OK` when they can, or
the first node that cannot. A malformed record is reported, and the records read
before it are still used. `-G N` prints a random complete puzzle on nodes `C1` to
`CN` instead.

### kitbag-chat: chat over TCP

    kitbag-chat -s <port>            # run a server
    kitbag-chat -c <address> <port>  # connect to a server

The server greets each client and prints everything that clients send to it. The
client sends each word it reads from standard input and prints the server's
replies. Messages go over the wire as UTF-32LE. Type `/exit` on either side to stop.

## Library pieces

- `kitbag.sortedarray.Array`: a growable array. After `sort(cmp)` it keeps its order
  on `add`. `find` and `locate` then do binary searches; `set` is refused on a
  sorted array. `resize` grows the array with `None` or shrinks it, passing the
  dropped objects to a callback.
- `kitbag.linked.LinkedStack`: a singly linked stack with `push` and `pop`.
  Iteration runs from the newest item.
- `kitbag.btree.BinaryTree`: an unbalanced binary search tree ordered by a three-way
  compare function. It supports `add` and `delete`, and iteration is in order.
- `kitbag.strbuf.StringBuffer`: a string builder with `append`, `append_char`,
  `printf`-style appends, `reset` and `dup`. `kitbag.strbuf.split_fields` is a
  single-character field splitter that keeps empty fields.
- `kitbag.writers.Writers`: writes the same formatted text to several open streams
  and named files. It can be used as a context manager.
- `kitbag.pcf_font.open_font` and `PcfFont`: read the PCF table of contents,
  properties, encodings, bitmaps, metrics (compressed or not) and glyph names.
  `msbyte4` decodes a big-endian 32-bit value.
- `kitbag.life.LifePattern`: Conway's Game of Life on a bounded square board.
- `kitbag.paths`: `parse`, `generate` and `format_path` for the path puzzle records.
- `kitbag.cmdparser.CommandParser`: getopt-style parsing that collects options and
  free arguments in any order.
- `kitbag.zpipe.compress_stream` and `decompress_stream`: stream-to-stream zlib.

```python
from kitbag.life import LifePattern

board = LifePattern(6)
for x in (15, 20, 25):      # screen points: 10-pixel margin, 5 pixels per cell
    board.new_life(x, 20)
board.next()
print(board.render())
```

## What it does not do

- Game of Life has no window and no command of its own. `LifePattern` holds the
  board, steps it forward and renders it as text (`#` for a live cell).
- The chat server does not relay messages between clients. It only prints them.
- `pcfont` can pick only from its five fixed font paths and cannot take an arbitrary
  font file. Use `kitbag.pcf_font.open_font` for other files.