import pytest

from labworks import aes

KEY_HEX = "2b7e151628aed2a6abf7158809cf4f3c"


def _sample_state():
    return aes.bytes_to_state(bytes(range(0x30, 0x40)))


def test_pad_text_to_block_multiple():
    padded = aes.pad_text(b"hello")
    assert len(padded) == 16
    assert padded.startswith(b"hello")
    assert padded[5:] == b" " * 11


def test_pad_text_keeps_full_blocks_and_empty():
    block = b"A" * 16
    assert aes.pad_text(block) == block
    assert aes.pad_text(b"") == b""


def test_rot_word():
    assert aes.rot_word([1, 2, 3, 4]) == [2, 3, 4, 1]


def test_sub_word_uses_sbox():
    assert aes.sub_word([0x00, 0x01]) == [0x63, 0x7C]


def test_add_round_constant_first_round():
    assert aes.add_round_constant([0, 5, 6, 7], 1) == [0x01, 5, 6, 7]
    assert aes.add_round_constant([0, 0, 0, 0], 10) == [0x36, 0, 0, 0]


@pytest.mark.parametrize("round_number", [0, 11])
def test_add_round_constant_rejects_bad_round(round_number):
    with pytest.raises(ValueError):
        aes.add_round_constant([0, 0, 0, 0], round_number)


def test_xor_words_self_is_zero():
    word = [0x12, 0x34, 0x56, 0x78]
    assert aes.xor_words(word, word) == [0, 0, 0, 0]
    assert aes.xor_words(word, [0, 0, 0, 0]) == word


def test_gf_multiply_fips_example():
    assert aes.gf_multiply(0x57, 0x83) == 0xC1


def test_gf_multiply_identity_and_commutative():
    for a in (0x00, 0x01, 0x57, 0xFF):
        assert aes.gf_multiply(a, 1) == a
        assert aes.gf_multiply(a, 0x13) == aes.gf_multiply(0x13, a)


def test_expand_key_last_round_key():
    schedule = aes.expand_key(bytes.fromhex(KEY_HEX))
    assert len(schedule) == 11
    assert aes.state_to_bytes(schedule[0]) == bytes.fromhex(KEY_HEX)
    assert aes.state_to_bytes(schedule[10]).hex() == "d014f9a8c9ee2589e13f0cc8b6630ca6"


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_expand_key_rejects_other_sizes(length):
    with pytest.raises(aes.KeySizeError):
        aes.expand_key(b"k" * length)


def test_state_round_trip():
    block = bytes(range(16))
    state = aes.bytes_to_state(block)
    assert state[0] == [0, 4, 8, 12]
    assert aes.state_to_bytes(state) == block


def test_bytes_to_state_rejects_short_block():
    with pytest.raises(ValueError):
        aes.bytes_to_state(b"short")


def test_sub_bytes_round_trip():
    state = _sample_state()
    assert aes.inv_sub_bytes(aes.sub_bytes(state)) == state


def test_shift_rows_invariants():
    state = _sample_state()
    shifted = aes.shift_rows(state)
    assert shifted[0] == state[0]
    for original, moved in zip(state, shifted):
        assert sorted(original) == sorted(moved)
    assert aes.inv_shift_rows(shifted) == state


def test_mix_columns_known_column():
    column = [0xDB, 0x13, 0x53, 0x45]
    state = [[value] * 4 for value in column]
    mixed = aes.mix_columns(state)
    assert [row[0] for row in mixed] == [0x8E, 0x4D, 0xA1, 0xBC]


def test_mix_columns_round_trip():
    state = _sample_state()
    assert aes.inv_mix_columns(aes.mix_columns(state)) == state


def test_add_round_key_is_involution():
    state = _sample_state()
    key = aes.bytes_to_state(bytes.fromhex(KEY_HEX))
    assert aes.add_round_key(aes.add_round_key(state, key), key) == state


def test_inverse_rounds_undo_cipher_rounds():
    schedule = aes.expand_key(bytes.fromhex(KEY_HEX))
    state = _sample_state()
    encrypted = aes.cipher_rounds(state, schedule)
    assert encrypted != state
    assert aes.inverse_rounds(encrypted, schedule) == state


def test_encrypt_length_and_padding():
    iv = bytes(16)
    ciphertext = aes.encrypt(b"a message longer than one block", b"key", iv)
    assert len(ciphertext) == 32
    assert aes.encrypt(b"", b"key", iv) == b""


def test_encrypt_first_block_is_xor_stream():
    iv = bytes(range(16))
    first = b"A" * 16
    second = b"B" * 16
    c1 = aes.encrypt(first, b"key", iv)
    c2 = aes.encrypt(second, b"key", iv)
    assert bytes(a ^ b for a, b in zip(c1, c2)) == bytes(a ^ b for a, b in zip(first, second))


def test_encrypt_pads_key_with_spaces():
    iv = bytes(16)
    assert aes.encrypt(b"data", b"key", iv) == aes.encrypt(b"data", b"key" + b" " * 13, iv)


def test_encrypt_rejects_long_key():
    with pytest.raises(aes.KeySizeError):
        aes.encrypt(b"data", b"k" * 17, bytes(16))


def test_encrypt_rejects_empty_key():
    with pytest.raises(aes.KeySizeError):
        aes.encrypt(b"data", b"", bytes(16))


def test_encrypt_rejects_bad_iv():
    with pytest.raises(ValueError):
        aes.encrypt(b"data", b"key", b"short")


def test_decrypt_first_block_is_xor_stream():
    iv = bytes(range(16))
    c1 = b"\x01" * 16
    c2 = b"\x80" * 16
    p1 = aes.decrypt(c1, b"key", iv)
    p2 = aes.decrypt(c2, b"key", iv)
    assert bytes(a ^ b for a, b in zip(p1, p2)) == bytes(a ^ b for a, b in zip(c1, c2))


def test_decrypt_ignores_partial_block():
    iv = bytes(16)
    full = b"\x11" * 16
    assert aes.decrypt(full + b"\x22" * 5, b"key", iv) == aes.decrypt(full, b"key", iv)


def test_strip_padding():
    assert aes.strip_padding(b"hi   ") == b"hi"
    assert aes.strip_padding(b"    ") == b""
    assert aes.strip_padding(b" a b") == b" a b"


def test_main_runs(capsys):
    code = aes.main(["--key", "key", "--message", "hello", "--iv", "00" * 16])
    out = capsys.readouterr().out
    assert code == 0
    assert "Final Ciphertext (Hex):" in out
    assert "Final Decrypted Text (without padding):" in out


def test_main_rejects_long_key(capsys):
    code = aes.main(["--key", "k" * 20, "--message", "hello", "--iv", "00" * 16])
    err = capsys.readouterr().err
    assert code == 1
    assert "Error" in err