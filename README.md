# labworks

Four small exercises. Each lives in its own module and has its own
command-line entry point. The package has no dependencies outside the
standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## `labworks.aes` — AES-128 rounds in a feedback block mode

The module provides the AES-128 building blocks, each working on a 4×4 state
`state[row][col]` that is filled column by column from a 16-byte block:

- key schedule: `expand_key`, `rot_word`, `sub_word`, `add_round_constant`, `xor_words`
- round steps: `sub_bytes`, `shift_rows`, `mix_columns`, `add_round_key`
- inverse steps: `inv_sub_bytes`, `inv_shift_rows`, `inv_mix_columns`
- whole round sequences: `cipher_rounds`, `inverse_rounds`
- helpers: `gf_multiply`, `bytes_to_state`, `state_to_bytes`

`expand_key` returns the eleven round-key states.

`encrypt(message, key, iv)` pads both the key and the message with spaces to
a multiple of 16 bytes. It then runs the ten cipher rounds over the previous
ciphertext block, starting from `iv`, and XORs the result with the message
block.

`decrypt(ciphertext, key, iv)` runs the inverse rounds over the previous
ciphertext block and XORs that with the ciphertext block. It returns the
padded plaintext. Any trailing bytes that do not fill a whole block are
ignored.

`pad_text` adds the space padding and `strip_padding` removes trailing
spaces. If the padded key is not exactly 16 bytes, `KeySizeError` (a
`ValueError`) is raised. An IV that is not 16 bytes raises `ValueError`.

    labworks-aes [--key KEY] [--message MESSAGE] [--iv HEX]

The command prompts for the key and the message if they are not given, and
uses a random IV if `--iv` is omitted. It prints:

- the padded key and the padded message
- the key matrix and the IV matrix
- the ciphertext in hex
- the decrypted hex and text, with and without padding

It exits with status 1 if the key or IV has the wrong size.

## `labworks.banana` — split a number for the most one bits

- `count_ones(number)` counts the one bits of a number.
- `pair_ones(first, second)` counts the one bits of two numbers together.
- `best_split(n)` returns `(i, n - i)` with `i <= n - i` that has the most one bits in total. When several splits tie, the one whose parts are furthest apart wins. `n` must be in 0..263; anything outside that range raises `ValueError`.

      labworks-banana [N]

The command prompts for `N` if it is not given. It prints the two numbers,
or `ERROR` with exit status 1 when `N` is out of range.

## `labworks.matrix` — matrix puzzles

- `random_matrix(rows, cols, start, end, rng=None)` builds a grid of random integers in `start..end`.
- `longest_increasing_run(values)` returns the first longest strictly increasing contiguous run.
- `contains_word(grid, word)` tells whether `word` can be traced through horizontally or vertically adjacent cells, using each cell at most once.

      labworks-matrix

The command reads the following from standard input, separated by
whitespace:

1. the number of rows
2. the number of columns
3. the grid characters
4. a word

It echoes the grid and then prints `true` or `false`.

## `labworks.slau` — systems of linear equations

- `forward_elimination(matrix, constants)` reduces a square system to upper triangular form using partial pivoting. It returns new lists. If a pivot is smaller than 0.001 in absolute value, it raises `SingularMatrixError`.
- `solve_upper_triangular(matrix, constants)` performs back substitution.
- `is_diagonally_dominant(matrix)` checks diagonal dominance row by row.
- `simple_iteration(matrix, constants, tolerance=0.001, max_iterations=100)` runs simple iteration starting from zero and returns an `IterationResult`. The result holds:
  - `converged`
  - `solution`
  - `iterations`
  - `norm`
  - `diagonally_dominant`

  Iteration is only attempted when the row-sum norm of the iteration matrix is below 1. A zero on the diagonal raises `SingularMatrixError`.

      labworks-slau

The command solves a built-in 4×4 system by Gaussian elimination. It then
reports whether simple iteration applies to that system and, if so, what it
gives.

## What the package does not do

The block mode in `labworks.aes` is a teaching construction. Its output does
not match any standard AES mode, so it is not meant to protect real data.
`labworks-slau` only solves its built-in system and does not read a system
from input.