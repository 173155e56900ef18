# tinkerbox

A collection of small, self-contained pieces of code to read, run and
experiment with: classic algorithms, bit-level tricks, toy ciphers and
checksums, a tiny SQLite-backed book catalogue, and a chat room over TCP.
It uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `tinkerbox.graphs` | `bellman_ford`, `dijkstra`, `find_lowest_cost`, `breadth_first_search`, `Edge`, `KeyedQueue` |
| `tinkerbox.sorting` | `merge_sort`, `quick_sort`, `selection_sort`, `selection_sort_in_place`, `binary_search`, `binary_search_recursive` |
| `tinkerbox.recursion` | `factorial`, `find_max`, `recursive_sum`, `gcd`, `gcd_steps`, `square_plot`, `subsets`, `permutations`, `set_operations` |
| `tinkerbox.dynamic` | `edit_distance`, `edit_distance_grid`, `knapsack` with `Item`, `min_cost_path`, `common_characters`, `schedule_lessons` with `Lesson` |
| `tinkerbox.bits` | `any_eq_one`, `any_eq_zero`, `any_odd_one`, `format_bits`, `format_bytes`, `float_bits`, `byte_order`, `replace_byte`, `mult2`, and the overflow checks `tadd_ok`, `uadd_ok`, `tmul_ok`, `tmul_ok64` |
| `tinkerbox.wordcount` | `count_text`, `count_file`, `TextStats` |
| `tinkerbox.ciphers` | `modular_pow`, `is_prime`, `random_prime`, `RsaKeys`, `generate_rsa_keys`, `rsa_encode`, `rsa_decode`, `generate_key`, `xor_bytes`, `DiffieHellmanParty`, `pad_block`, `rotr8`, `rotr32`, `sigma`, `choice`, `major` |
| `tinkerbox.crc` | bitwise and table-driven 8-bit CRC: `crc8_bitwise`, `build_table`, `crc8_table`, `crc8` |
| `tinkerbox.sha2` | SHA-256: `Sha2` with `update`, `digest`, `hexdigest`, and `sha2_hex` |
| `tinkerbox.bookstore` | `BookStore`, `Book`, `User`: users and books kept in SQLite |
| `tinkerbox.bookstore_cli` | the interactive log-in and book menu built on `BookStore` (`prompt_user`, `prompt_book`, `login`, `run`) |
| `tinkerbox.ipaddr` | `detect_ip_version`, `inet_aton_loose`, `resolve_address` |
| `tinkerbox.chat` | `ChatServer`, `Connection`, `run_client`, the length-prefixed framing `encode_frame` / `read_frame`, and `parse_private` for `/name message` private messages |

## Using it from Python

```python
from tinkerbox.sorting import merge_sort, quick_sort
from tinkerbox.recursion import factorial, gcd, subsets

merge_sort([1, 3, 5, 7, 0, 9, 2, 4])   # [0, 1, 2, 3, 4, 5, 7, 9]
quick_sort([3, 1, 2])                  # [1, 2, 3]
factorial(5)                           # 120
gcd(1785, 546)                         # 21
subsets([0, 1])                        # [[], [0], [0, 1], [1]]
```

Checksums and hashes:

```python
from tinkerbox.crc import crc8
from tinkerbox.sha2 import Sha2, sha2_hex

crc8(b"hello")
sha2_hex(b"abc")
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

hasher = Sha2()
hasher.update(b"a")
hasher.update(b"bc")
hasher.hexdigest()                     # same digest as above
```

The SQLite catalogue. `BookStore` is also a context manager that closes
the connection on exit:

```python
from tinkerbox.bookstore import Book, BookStore

with BookStore("users.db") as store:
    store.create_tables()
    store.create_book(Book(title="Dune", author="Frank Herbert", price=10))
    for book in store.list_books():
        print(book.title, book.author, book.price)
```

## Commands

Each module that has something to show comes with a command:

```
tinkerbox-graphs [bellman-ford|dijkstra|bfs|queue|all]
tinkerbox-sorting 5 3 9 1 --method merge      # merge, quick or selection
tinkerbox-sorting --find 7                    # binary search in 1..10
tinkerbox-recursion gcd 1785 546              # also: factorial, max, sum, square,
                                              #       subsets, permutations, sets
tinkerbox-dynamic edit kitten sitting         # also: knapsack, path, common, schedule
tinkerbox-bits float -3.2                     # also: demo, bits, order, replace,
                                              #       overflow, mult
tinkerbox-wordcount notes.txt
tinkerbox-ciphers rsa "hello world!"          # also: modpow, otp, dh, pad, rotr, sigma
tinkerbox-crc "some text"                     # add --bitwise for the bitwise variant
tinkerbox-sha2 "some text"
tinkerbox-books --db users.db                 # log in, then add or list books
tinkerbox-ip detect 192.168.0.1               # also: loose, resolve
tinkerbox-chat-server --port 3490
tinkerbox-chat-client --host 127.0.0.1 --port 3490 --name alice
```

`tinkerbox-dynamic knapsack` reads the capacity, the number of items and
then one weight/value pair per item from standard input. `tinkerbox-crc`,
`tinkerbox-sha2` and most `tinkerbox-ciphers` subcommands read a line from
standard input when no message is given.

In the chat room, a message of the form `/name text` goes only to the user
called `name`; everything else goes to everyone else in the room. A user
alone in the room is told `server: the room is empty`.

## Limits

- `tinkerbox.sha2`, the CRC functions and everything in `tinkerbox.ciphers`
  are learning material. The RSA keys are built from primes below 100 and
  protect nothing.
- The book catalogue stores passwords as plain text.
- The chat room has no accounts, authentication or encryption; names are
  whatever each client sends first.
- There is no graphical interface; every command works in a terminal.