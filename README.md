# ternvig

This package provides two self-contained tools:

- **Ternary trees** (`ternvig.ternary_tree`). Each node holds a key and
  three subtree slots: left, middle and right. You can attach and detach
  subtrees, make deep copies, move a tree's contents, and walk a tree in
  prefix order.
- **Autokey Vigenère cipher** (`ternvig.vigenere`, `ternvig.key_provider`,
  `ternvig.vigenere_stream`). The cipher works one character at a time.
  Each plaintext letter becomes part of the running key. A file reader
  applies the cipher to every byte of a file as it reads it.

There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Ternary trees

```python
from ternvig.ternary_tree import TernaryTree

root = TernaryTree("This")
a = TernaryTree("is")
b = TernaryTree("tree")
c = TernaryTree("action.")

aa = TernaryTree("a")
aa.add_right(TernaryTree("ternary"))
a.add_left(aa)
b.add_middle(TernaryTree("in"))
c.add_middle(TernaryTree("It"))
c.add_right(TernaryTree("works!"))

root.add_left(a)
root.add_middle(b)
root.add_right(c)

print(" ".join(root))   # This is a ternary tree in action. It works!
print(root.height())    # 3
```

### The `NIL` sentinel

An empty slot holds the shared sentinel `TernaryTree.NIL`. Only that
sentinel returns true from `is_empty()`. `is_leaf()` is true when all three
slots of a node are empty.

### Reading a node

- `key` returns the node's key.
- `left`, `middle` and `right` return the subtrees in the three slots.

### Changing a node

- `add_left`, `add_middle` and `add_right` place a tree in an empty slot.
- `remove_left`, `remove_middle` and `remove_right` empty a slot and return
  the subtree that was in it.

### Copying and moving

- `clone()` returns a deep copy. Empty slots in the copy still hold `NIL`.
- `assign(other)` replaces the tree's key and subtrees with a deep copy of
  `other`.
- `take()` moves the key and the subtrees into a new tree. The original keeps
  its key and becomes a leaf.

### Walking a tree

Iterating a tree yields its keys in prefix order: the node first, then its
left, middle and right subtrees. `PrefixIterator(tree)` is the same walk as
an explicit iterator object. Iterating `NIL` yields nothing.

### Errors

Errors raise `TreeDomainError`, which is a subclass of `ValueError`. It is
raised in these cases:

- adding to a slot that already holds a subtree;
- adding any subtree to `NIL`;
- removing from an empty slot;
- asking `NIL` for its `key` or `height()`;
- calling `clone()` or `take()` on `NIL`;
- assigning from `NIL`, or assigning into `NIL`.

## Vigenère cipher

```python
from ternvig.vigenere import Vigenere

cipher = Vigenere("Relations")
secret = "".join(cipher.encode(ch) for ch in "To be, or not to be")

cipher.reset()
plain = "".join(cipher.decode(ch) for ch in secret)
assert plain == "To be, or not to be"
```

### How the cipher behaves

- `encode` and `decode` each take one character.
- ASCII letters are enciphered and keep their case.
- Every other character passes through unchanged and does not advance the
  key.
- After each letter, the plaintext letter replaces the key letter that was
  just used, and the key moves on to the next position.
- `reset()` restores the original keyword.
- `current_keyword()` returns the key as it now stands, read from the current
  position onward.

### The running key

`KeyProvider` in `ternvig.key_provider` holds the running key:

- `current` is the key letter at the current position.
- `push(ch)` replaces that letter and advances, wrapping at the end.
- `initialize(keyword)` installs a keyword again and returns to the start.

A keyword must be non-empty and made only of ASCII letters. It is stored in
upper case. Anything else raises `ValueError`.

## Reading a file through the cipher

`VigenereReader(cipher, keyword, path)` opens `path` in binary mode. It
passes each byte, as a character, through `cipher`. There are two cipher
functions:

- `encode_cipher` encodes each character.
- `decode_cipher` decodes each character.

```python
from ternvig.vigenere_stream import VigenereReader, decode_cipher

with VigenereReader(decode_cipher, "Relations", "message.txt") as reader:
    print("".join(reader))
```

### Reading

- `read_char()` returns the next character, or `""` at end of file. After
  that, `eof()` is true.
- Iterating the reader first calls `reset()`, which rewinds the file and
  restarts the key. It then yields every character of the file.
- `good()`, `is_open()` and `close()` report on and manage the open file.
- `open(path)` raises `OSError` if the file cannot be opened.

### Not provided

The reader only reads. The package has no writer for enciphered files. To
produce one, encode the characters yourself and write them out.

## Commands

```
ternvig-tree-demo [1] [2] [3] [4]
ternvig-cipher-demo {1,2,3,4} [--keyword WORD] [--message TEXT] [--file PATH]
```

### `ternvig-tree-demo`

This command builds the sample tree shown above and prints a walkthrough.
There are four demonstrations; with no arguments, all four run.

1. Attaching and detaching subtrees, and the errors those raise.
2. Copying.
3. Moving.
4. Prefix traversal.

### `ternvig-cipher-demo`

This command runs one demonstration, chosen by its first argument. The
keyword defaults to `Relations`.

1. Shows the running key under each letter of the message.
2. Encodes the message, then decodes it again.
3. Decodes a file with `decode_cipher`. The file defaults to `sample_3.txt`
   in the current directory.
4. Iterates over a file with `encode_cipher`. The file defaults to
   `sample_4.txt` in the current directory.

If the file cannot be opened, the command prints a message to standard error
and exits with status 2.