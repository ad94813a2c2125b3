# wheelkit

A small collection of classic data structures and algorithms, a few
command-line tools built on them, and the rules of two little games
(Snake and a platform jumper) without any graphics attached.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library tour

### Double-ended queue

```python
from wheelkit.dequeue import Dequeue

q = Dequeue([1, 2, 3])
q.push_front(0)
q.push_back(4)
q.pop_front()   # 0
q.pop_back()    # 4
q.first(), q.last()   # (1, 3)
len(q)          # 3
list(q)         # [1, 2, 3]
q.is_empty()    # False
```

`pop_front`, `pop_back`, `first` and `last` raise `IndexError` on an empty
dequeue.

### Growable array list and quicksort

```python
from wheelkit.lists import ArrayList
from wheelkit.sorting import qsort

items = ArrayList([5, 3, 1, 4, 2])
items.insert(0, 0)
items.push(6)
items.delete(0)       # 0, the removed value
qsort(items)
list(items)           # [1, 2, 3, 4, 5, 6]
print(items)          # {1, 2, 3, 4, 5, 6}
```

Reading, writing or deleting outside the list raises `IndexError`; so does
inserting past its end. `ArrayList(capacity=n)` starts empty with a given
capacity (128 by default); `items.capacity` grows and shrinks as elements
are added and removed. `items.shuffle()` shuffles in place.

`qsort` shuffles and then sorts any mutable sequence in place, such as a
`list` or an `ArrayList`.

### Strings and KMP search

```python
from wheelkit.text import Str, kmp, build_next, build_nextval

kmp("aaabaaaab", "aaaab")   # 4
kmp("aaabaaaab", "aaacb")   # -1
build_next("aaabaaaab")     # [-1, 0, 1, 2, 0, 1, 2, 3, 3]
build_nextval("aaaab")      # [-1, -1, -1, -1, 3]

s = Str("hello")
s.push_str(" world")
s.delete(0)                 # 'h'
s.insert_str(0, "c")
str(s)                      # 'cello world'
```

`Str.readline(stream)` replaces the contents with the next line of a text
stream, newline included, and leaves the string empty at end of input.

### Binary trees

```python
from wheelkit.tree import BST, Tree, render_tree

tree = Tree.build([1, 2, 4, 5, 3], [4, 2, 5, 1, 3])
tree.preorder()      # [1, 2, 4, 5, 3]
tree.postorder()     # [4, 5, 2, 3, 1]
tree.levelorder()    # [1, 2, 3, 4, 5]
tree.height()        # 3
tree.size()          # 5
print(tree.render()) # ASCII drawing of the tree

bst = BST()
for value in [4, 2, 1, 3, 6, 5, 7]:
    bst.insert(value)
bst.search(5)        # the node holding 5, or None
len(bst)             # 7
```

`Tree.insert(node, is_left)` links a child, `Tree.detach()` unlinks a node
from its parent, `Tree.root()` walks up to the root and `Tree.equal(other)`
compares two trees by their traversals. `Tree.build` returns `None` for
empty traversals and raises `ValueError` when their lengths differ.
`tree_size`, `tree_height` and `render_tree` also accept `None`. The drawing
shows each value as one character (`0-9`, `a-z`, `A-Z`, i.e. 0 to 62).

### IEEE 754 inspection

```python
from wheelkit.floats import decode_f32, decode_f64, decode_f32_bits

decode_f32(0.25)            # DecodedFloat(m=1.0, exponent=-2, sign=1)
decode_f64(-0.25)           # DecodedFloat(m=1.0, exponent=-2, sign=-1)
decode_f32_bits(0x00400000) # DecodedFloat(m=0.5, exponent=-127, sign=1)
```

`decode_f64_bits` does the same for 64-bit patterns.

### Other helpers

- `wheelkit.mathutil.usize_log2(n)` – floor of the base-2 logarithm of a
  positive integer; `ValueError` otherwise.
- `wheelkit.paths.os_path(path, windows=None)` – turns `/` into `\` when
  `windows` is true (by default, when running on Windows).
- `wheelkit.rng` – `random_usize()`, `random_isize()`, `random_f64()`,
  `random_range(start, end)` (half-open) and `tsrandom()` to seed from the
  clock.
- `wheelkit.core` – `time_now()`, `elapsed(t0)` in milliseconds and
  `clamp(value, low, high)`.

## Command-line tools

Inspect the bits of IEEE 754 numbers given in hexadecimal; each line shows
the pattern, sign, mantissa, exponent and value:

```
hex2float 3E800000 00400000
hex2double 3FD0000000000000
```

Both exit with status 1 when given no arguments or an invalid value.

Sort lines read from standard input:

```
wheel-sort < names.txt
```

Drop lines equal to the line before them:

```
wheel-uniq < log.txt
```

## Game logic

`wheelkit.snake` holds the rules of Snake. `SnakeGame(rng)` keeps the snake,
the fruit and the game switches; `rng` is any object with a `randint`
method, such as `random.Random(seed)`. Call `update(key)` once per tick with
a `Key` or `None`. Arrow keys, `W/A/S/D` and `H/J/K/L` steer, `R` resets,
`M` switches automatic play on and off (then `search_path()` steers the
snake towards the fruit), `P` pauses, `F` toggles fast-forward (reflected in
`fps`) and `B` toggles `music_playing`. `score()` counts the fruit eaten and
`played` records the sounds asked for (`"eat"`, `"die"`).

`wheelkit.jump` holds the physics of a small platform jumper:
`wheelkit.jump.entity` has rectangles, vectors, `collision_rect` and
`new_platform`; `wheelkit.jump.player` has `new_player` and `Player`, with
gravity and sprite animation; `wheelkit.jump.game.JumpGame` places the
platforms, takes keys through `input(pressed, down, released)` (`"k"` jumps,
`"a"`/`"d"` walk) and resolves collisions on each `update()`.

## What the package does not do

There is no window, drawing, sound or music playback, and no program that
runs either game. The game classes only compute state (positions, sprite
rectangles, texture paths and requested sounds) for a front end to present.