"""AES-128 block transformations and a feedback stream mode built on them.

The state is a 4x4 list of rows, ``state[row][col]``, filled column by column
from a 16-byte block. Keys and messages are padded with spaces to a multiple
of 16 bytes. Each block is produced by running the round function over the
previous ciphertext block (the IV for the first one) and XOR-ing the result
with the data block.
"""

from __future__ import annotations

import argparse
import secrets
import sys
from collections.abc import Sequence

BLOCK_SIZE = 16
ROUNDS = 10
PADDING_BYTE = b" "

SBOX = bytes((
    0x63, 0x7C, 0x77, 0x7B, 0xF2, 0x6B, 0x6F, 0xC5, 0x30, 0x01, 0x67, 0x2B, 0xFE, 0xD7, 0xAB, 0x76,
    0xCA, 0x82, 0xC9, 0x7D, 0xFA, 0x59, 0x47, 0xF0, 0xAD, 0xD4, 0xA2, 0xAF, 0x9C, 0xA4, 0x72, 0xC0,
    0xB7, 0xFD, 0x93, 0x26, 0x36, 0x3F, 0xF7, 0xCC, 0x34, 0xA5, 0xE5, 0xF1, 0x71, 0xD8, 0x31, 0x15,
    0x04, 0xC7, 0x23, 0xC3, 0x18, 0x96, 0x05, 0x9A, 0x07, 0x12, 0x80, 0xE2, 0xEB, 0x27, 0xB2, 0x75,
    0x09, 0x83, 0x2C, 0x1A, 0x1B, 0x6E, 0x5A, 0xA0, 0x52, 0x3B, 0xD6, 0xB3, 0x29, 0xE3, 0x2F, 0x84,
    0x53, 0xD1, 0x00, 0xED, 0x20, 0xFC, 0xB1, 0x5B, 0x6A, 0xCB, 0xBE, 0x39, 0x4A, 0x4C, 0x58, 0xCF,
    0xD0, 0xEF, 0xAA, 0xFB, 0x43, 0x4D, 0x33, 0x85, 0x45, 0xF9, 0x02, 0x7F, 0x50, 0x3C, 0x9F, 0xA8,
    0x51, 0xA3, 0x40, 0x8F, 0x92, 0x9D, 0x38, 0xF5, 0xBC, 0xB6, 0xDA, 0x21, 0x10, 0xFF, 0xF3, 0xD2,
    0xCD, 0x0C, 0x13, 0xEC, 0x5F, 0x97, 0x44, 0x17, 0xC4, 0xA7, 0x7E, 0x3D, 0x64, 0x5D, 0x19, 0x73,
    0x60, 0x81, 0x4F, 0xDC, 0x22, 0x2A, 0x90, 0x88, 0x46, 0xEE, 0xB8, 0x14, 0xDE, 0x5E, 0x0B, 0xDB,
    0xE0, 0x32, 0x3A, 0x0A, 0x49, 0x06, 0x24, 0x5C, 0xC2, 0xD3, 0xAC, 0x62, 0x91, 0x95, 0xE4, 0x79,
    0xE7, 0xC8, 0x37, 0x6D, 0x8D, 0xD5, 0x4E, 0xA9, 0x6C, 0x56, 0xF4, 0xEA, 0x65, 0x7A, 0xAE, 0x08,
    0xBA, 0x78, 0x25, 0x2E, 0x1C, 0xA6, 0xB4, 0xC6, 0xE8, 0xDD, 0x74, 0x1F, 0x4B, 0xBD, 0x8B, 0x8A,
    0x70, 0x3E, 0xB5, 0x66, 0x48, 0x03, 0xF6, 0x0E, 0x61, 0x35, 0x57, 0xB9, 0x86, 0xC1, 0x1D, 0x9E,
    0xE1, 0xF8, 0x98, 0x11, 0x69, 0xD9, 0x8E, 0x94, 0x9B, 0x1E, 0x87, 0xE9, 0xCE, 0x55, 0x28, 0xDF,
    0x8C, 0xA1, 0x89, 0x0D, 0xBF, 0xE6, 0x42, 0x68, 0x41, 0x99, 0x2D, 0x0F, 0xB0, 0x54, 0xBB, 0x16,
))


def _invert_table(table: bytes) -> bytes:
    inverse = bytearray(len(table))
    for index, value in enumerate(table):
        inverse[value] = index
    return bytes(inverse)


INV_SBOX = _invert_table(SBOX)

RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)

State = list[list[int]]
Word = list[int]


class KeySizeError(ValueError):
    """Raised when a key does not give exactly one 16-byte block."""


def pad_text(data: bytes) -> bytes:
    """Pad ``data`` with spaces to a multiple of 16 bytes (empty stays empty)."""
    remainder = len(data) % BLOCK_SIZE
    if remainder:
        data += PADDING_BYTE * (BLOCK_SIZE - remainder)
    return data


def rot_word(word: Sequence[int]) -> Word:
    """Rotate a word one byte to the left."""
    word = list(word)
    return word[1:] + word[:1]


def sub_word(word: Sequence[int]) -> Word:
    """Replace every byte of a word through the S-box."""
    return [SBOX[b] for b in word]


def add_round_constant(word: Sequence[int], round_number: int) -> Word:
    """XOR the round constant of ``round_number`` (1..10) into the first byte."""
    if not 1 <= round_number <= len(RCON):
        raise ValueError(f"round number must be in 1..{len(RCON)}, got {round_number}")
    word = list(word)
    word[0] ^= RCON[round_number - 1]
    return word


def xor_words(first: Sequence[int], second: Sequence[int]) -> Word:
    """XOR two words byte by byte."""
    return [a ^ b for a, b in zip(first, second)]


def gf_multiply(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) modulo the AES polynomial."""
    result = 0
    for _ in range(8):
        if b & 1:
            result ^= a
        high_bit = a & 0x80
        a = (a << 1) & 0xFF
        if high_bit:
            a ^= 0x1B
        b >>= 1
    return result


def expand_key(key: bytes) -> list[State]:
    """Expand a 16-byte key into the eleven round-key states."""
    if len(key) != BLOCK_SIZE:
        raise KeySizeError(
            f"key must be {BLOCK_SIZE} bytes after padding, got {len(key)}"
        )
    words: list[Word] = [list(key[i:i + 4]) for i in range(0, BLOCK_SIZE, 4)]
    key_words = len(words)
    for round_number in range(1, ROUNDS + 1):
        for column in range(key_words * round_number, key_words * (round_number + 1)):
            previous = words[column - 1]
            if column % key_words == 0:
                previous = add_round_constant(sub_word(rot_word(previous)), round_number)
            words.append(xor_words(words[column - key_words], previous))
    return [
        [[words[r * key_words + c][row] for c in range(key_words)] for row in range(4)]
        for r in range(ROUNDS + 1)
    ]


def bytes_to_state(block: bytes) -> State:
    """Arrange a 16-byte block into a state, column by column."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return [[block[row + 4 * col] for col in range(4)] for row in range(4)]


def state_to_bytes(state: State) -> bytes:
    """Read a state back into 16 bytes, column by column."""
    return bytes(state[row][col] for col in range(4) for row in range(4))


def sub_bytes(state: State) -> State:
    """Substitute every byte of the state through the S-box."""
    return [sub_word(row) for row in state]


def inv_sub_bytes(state: State) -> State:
    """Substitute every byte of the state through the inverse S-box."""
    return [[INV_SBOX[b] for b in row] for row in state]


def shift_rows(state: State) -> State:
    """Rotate row ``n`` of the state left by ``n`` positions."""
    return [row[n:] + row[:n] for n, row in enumerate(state)]


def inv_shift_rows(state: State) -> State:
    """Rotate row ``n`` of the state right by ``n`` positions."""
    return [row[len(row) - n:] + row[:len(row) - n] for n, row in enumerate(state)]


def _transform_columns(state: State, coefficients: Sequence[int]) -> State:
    columns = []
    for column in zip(*state):
        columns.append([
            gf_multiply(coefficients[(i - row) % 4], value)
            for row in range(4)
            for i, value in [(0, 0)]  # placeholder replaced below
        ])
    # Build each output byte as a circulant product over the column.
    result_columns = []
    for column in zip(*state):
        out = []
        for row in range(4):
            acc = 0
            for k, value in enumerate(column):
                acc ^= gf_multiply(coefficients[(k - row) % 4], value)
            out.append(acc)
        result_columns.append(out)
    return [list(row) for row in zip(*result_columns)]


def mix_columns(state: State) -> State:
    """Multiply every column by the MixColumns matrix."""
    return _circulant(state, (0x02, 0x03, 0x01, 0x01))


def inv_mix_columns(state: State) -> State:
    """Multiply every column by the inverse MixColumns matrix."""
    return _circulant(state, (0x0E, 0x0B, 0x0D, 0x09))


def _circulant(state: State, coefficients: Sequence[int]) -> State:
    result_columns = []
    for column in zip(*state):
        out = []
        for row in range(4):
            acc = 0
            for k, value in enumerate(column):
                acc ^= gf_multiply(coefficients[(k - row) % 4], value)
            out.append(acc)
        result_columns.append(out)
    return [list(row) for row in zip(*result_columns)]


def add_round_key(state: State, round_key: State) -> State:
    """XOR a round key into the state."""
    return [xor_words(row, key_row) for row, key_row in zip(state, round_key)]


def cipher_rounds(state: State, schedule: Sequence[State]) -> State:
    """Apply rounds 1..10: SubBytes, ShiftRows, MixColumns (not in the last), AddRoundKey."""
    for round_number in range(1, ROUNDS + 1):
        state = shift_rows(sub_bytes(state))
        if round_number < ROUNDS:
            state = mix_columns(state)
        state = add_round_key(state, schedule[round_number])
    return state


def inverse_rounds(state: State, schedule: Sequence[State]) -> State:
    """Undo ``cipher_rounds``: rounds 10..1 with the inverse steps in reverse order."""
    for round_number in range(ROUNDS, 0, -1):
        state = add_round_key(state, schedule[round_number])
        if round_number < ROUNDS:
            state = inv_mix_columns(state)
        state = inv_sub_bytes(inv_shift_rows(state))
    return state


def _check_iv(iv: bytes) -> None:
    if len(iv) != BLOCK_SIZE:
        raise ValueError(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")


def _blocks(data: bytes):
    for start in range(0, len(data) - len(data) % BLOCK_SIZE, BLOCK_SIZE):
        yield data[start:start + BLOCK_SIZE]


def _xor_bytes(first: bytes, second: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(first, second))


def encrypt(message: bytes, key: bytes, iv: bytes) -> bytes:
    """Encrypt ``message`` (space-padded) with the space-padded ``key``.

    Each ciphertext block is the message block XOR the round function applied
    to the previous ciphertext block, starting from ``iv``.
    """
    schedule = expand_key(pad_text(key))
    _check_iv(iv)
    previous = iv
    out = bytearray()
    for block in _blocks(pad_text(message)):
        keystream = state_to_bytes(cipher_rounds(bytes_to_state(previous), schedule))
        previous = _xor_bytes(block, keystream)
        out += previous
    return bytes(out)


def decrypt(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
    """Decrypt ``ciphertext`` block by block, keeping padding.

    Each output block is the ciphertext block XOR the inverse round function
    applied to the previous ciphertext block, starting from ``iv``. Trailing
    bytes that do not fill a block are ignored.
    """
    schedule = expand_key(pad_text(key))
    _check_iv(iv)
    previous = iv
    out = bytearray()
    for block in _blocks(ciphertext):
        keystream = state_to_bytes(inverse_rounds(bytes_to_state(previous), schedule))
        out += _xor_bytes(block, keystream)
        previous = block
    return bytes(out)


def strip_padding(data: bytes) -> bytes:
    """Remove trailing space padding."""
    return data.rstrip(PADDING_BYTE)


def _print_state(state: State, label: str) -> None:
    print(f"{label}:")
    for row in state:
        print(" ".join(f"{b:02x}" for b in row) + " ")


def _show(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt and decrypt a message read from the arguments or standard input."""
    parser = argparse.ArgumentParser(
        prog="labworks-aes",
        description="Encrypt a message with AES-128 rounds in feedback mode and decrypt it.",
    )
    parser.add_argument("--key", help="key text (prompted for if omitted)")
    parser.add_argument("--message", help="message text (prompted for if omitted)")
    parser.add_argument("--iv", type=bytes.fromhex, help="IV as 32 hex digits (random if omitted)")
    args = parser.parse_args(argv)

    key_text = args.key if args.key is not None else input("Enter key: ")
    key = pad_text(key_text.encode("utf-8"))
    print(f"Padded key ({len(key)} bytes):")
    print(_show(key))

    message_text = args.message if args.message is not None else input("Enter message: ")
    message = pad_text(message_text.encode("utf-8"))
    print(f"Padded message ({len(message)} bytes):")
    print(_show(message))

    iv = args.iv if args.iv is not None else secrets.token_bytes(BLOCK_SIZE)
    try:
        if len(key) == BLOCK_SIZE:
            _print_state(bytes_to_state(key), "Key Matrix")
        ciphertext = encrypt(message, key, iv)
        _print_state(bytes_to_state(iv), "Initial IV")
        print("Final Ciphertext (Hex):")
        print("".join(f"{b:02x} " for b in ciphertext))

        decrypted = decrypt(ciphertext, key, iv)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    stripped = strip_padding(decrypted)
    print(f"Final Decrypted Hex (with padding): {decrypted.hex()}")
    print(f"Decrypted Text (with padding) : {_show(decrypted)}")
    print(f"Final Decrypted Hex (without padding): {stripped.hex()}")
    print(f"Final Decrypted Text (without padding): {_show(stripped)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())