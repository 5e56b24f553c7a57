"""
Base58Check - Codec Tests
===========================
Unit tests for Base58 encode/decode and Base58Check framing.
"""

import random

import pytest

import base58check
from base58check.codec import Base58Check, DecodedCheck, get_codec
from base58check.constants import BITCOIN_ALPHABET
from base58check.config import reload_settings
from base58check.errors import (
    ChecksumMismatchError,
    InvalidAlphabetError,
    InvalidCharacterError,
    MalformedInputError,
)

from vectors import (
    BASE58_VECTORS,
    BASE58CHECK_VECTORS,
    GENESIS_ADDRESS,
    GENESIS_HASH160,
    XPUB_VERSION,
)

RIPPLE_ALPHABET = "rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz"


def _sample_payloads():
    rng = random.Random(58)
    samples = [bytes(rng.getrandbits(8) for _ in range(size)) for size in (1, 2, 5, 20, 32, 64, 257)]
    samples += [b'\x00' * n + payload for n in (1, 2, 7) for payload in samples[:4]]
    samples += [b'', b'\x00', b'\x00' * 3, b'\xff' * 40, b'\x01' + b'\x00' * 30]
    return samples


class TestBase58:
    """Test Base58 encode/decode"""

    @pytest.mark.parametrize("hex_data,expected", BASE58_VECTORS)
    def test_reference_vectors(self, codec, hex_data, expected):
        """Test Bitcoin Core vectors bit-for-bit"""
        data = bytes.fromhex(hex_data)

        assert codec.encode(data) == expected
        assert codec.decode(expected) == data

    def test_hello(self, codec):
        assert codec.encode(b'hello') == 'Cn8eVZg'
        assert codec.decode('Cn8eVZg') == b'hello'

    @pytest.mark.parametrize("data", _sample_payloads())
    def test_round_trip(self, codec, data):
        """Test decode(encode(b)) == b"""
        encoded = codec.encode(data)

        assert codec.decode(encoded) == data
        assert all(char in BITCOIN_ALPHABET for char in encoded)

    def test_leading_zeros_preserved(self, codec):
        """Test each leading zero byte becomes exactly one '1'"""
        assert codec.encode(bytes([0, 0, 5, 9])) == '11PE'
        assert codec.decode('11PE') == bytes([0, 0, 5, 9])

        assert codec.encode(bytes([0, 0, 0, 1])) == '1112'

    def test_all_zero_input_not_double_counted(self, codec):
        """Test all-zero input yields one '1' per byte"""
        assert codec.encode(b'\x00') == '1'
        assert codec.encode(b'\x00' * 5) == '11111'
        assert codec.decode('11111') == b'\x00' * 5

    def test_empty_input(self, codec):
        """Test empty bytes round-trip through empty text"""
        encoded = codec.encode(b'')

        assert encoded == ''
        assert codec.decode(encoded) == b''

    def test_single_zero_byte_distinct_from_empty(self, codec):
        assert codec.encode(b'\x00') == '1'
        assert codec.decode('1') == b'\x00'

    def test_bytes_like_input(self, codec):
        assert codec.encode(bytearray(b'hello')) == 'Cn8eVZg'
        assert codec.encode(memoryview(b'hello')) == 'Cn8eVZg'

    def test_str_input_rejected(self, codec):
        with pytest.raises(TypeError):
            codec.encode('hello')

        with pytest.raises(TypeError):
            codec.decode(b'Cn8eVZg')

    @pytest.mark.parametrize("text", ['0', 'O', 'I', 'l', '1A1z0', 'abc+', ' 2g'])
    def test_invalid_character(self, codec, text):
        """Test characters outside the alphabet are never skipped"""
        with pytest.raises(InvalidCharacterError):
            codec.decode(text)

    def test_deterministic(self, codec):
        data = bytes(range(256))

        assert codec.encode(data) == codec.encode(data) == Base58Check().encode(data)


class TestIntegerEncoding:
    """Test integer encode/decode"""

    def test_encode_int(self, codec):
        assert codec.encode_int(0) == '1'
        assert codec.encode_int(57) == 'z'
        assert codec.encode_int(58) == '21'

    def test_decode_int(self, codec):
        assert codec.decode_int('21') == 58
        assert codec.decode_int('1121') == 58
        assert codec.decode_int('Cn8eVZg') == int.from_bytes(b'hello', 'big')

    def test_invalid_values(self, codec):
        with pytest.raises(ValueError):
            codec.encode_int(-1)

        with pytest.raises(TypeError):
            codec.encode_int(1.5)

        with pytest.raises(InvalidCharacterError):
            codec.decode_int('0')


class TestBase58Check:
    """Test Base58Check encode/decode"""

    @pytest.mark.parametrize("prefix_hex,payload_hex,expected", BASE58CHECK_VECTORS)
    def test_reference_vectors(self, codec, prefix_hex, payload_hex, expected):
        """Test known addresses and keys"""
        prefix = bytes.fromhex(prefix_hex)
        payload = bytes.fromhex(payload_hex)

        assert codec.encode_check(prefix, payload) == expected
        assert codec.decode_check(expected) == (prefix, payload)

    def test_decoded_check_fields(self, codec):
        result = codec.decode_check(GENESIS_ADDRESS)

        assert isinstance(result, DecodedCheck)
        assert result.prefix == b'\x00'
        assert result.payload == GENESIS_HASH160

    def test_integer_prefix(self, codec):
        """Test integer version values"""
        assert codec.encode_check(0, GENESIS_HASH160) == GENESIS_ADDRESS
        assert codec.encode_check(0xc4, bytes.fromhex(BASE58CHECK_VECTORS[2][1])) == BASE58CHECK_VECTORS[2][2]

        with pytest.raises(ValueError):
            codec.encode_check(-1, b'')

        with pytest.raises(TypeError):
            codec.encode_check(True, b'')

    def test_hex_payload_is_explicit(self, codec):
        """Test hex convenience entry point (either case)"""
        assert codec.encode_check_hex(b'\x00', GENESIS_HASH160.hex().upper()) == GENESIS_ADDRESS
        assert codec.encode_check_hex(b'\x00', '0x' + GENESIS_HASH160.hex()) == GENESIS_ADDRESS

        # Raw bytes that look like hex are never reinterpreted
        raw = GENESIS_HASH160.hex().encode('ascii')
        assert codec.encode_check(b'\x00', raw) != GENESIS_ADDRESS

    def test_hex_payload_invalid(self, codec):
        with pytest.raises(MalformedInputError):
            codec.encode_check_hex(b'\x00', 'xyz')

        with pytest.raises(MalformedInputError):
            codec.encode_check_hex(b'\x00', 'abc')

    def test_corrupted_last_character(self, codec):
        """Test checksum mismatch on a mistyped final character"""
        with pytest.raises(ChecksumMismatchError) as exc_info:
            codec.decode_check('1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNb')

        assert exc_info.value.code == "CHECKSUM_MISMATCH"
        assert len(exc_info.value.expected) == 4
        assert len(exc_info.value.got) == 4

    def test_corrupted_last_byte(self, codec):
        """Test flipping a bit of the checksum"""
        blob = codec.decode(GENESIS_ADDRESS)
        corrupted = codec.encode(blob[:-1] + bytes([blob[-1] ^ 0x01]))

        with pytest.raises(ChecksumMismatchError):
            codec.decode_check(corrupted)

    def test_single_substitution_detected(self, codec):
        """Test every single-character substitution is rejected"""
        for position, char in enumerate(GENESIS_ADDRESS):
            replacement = BITCOIN_ALPHABET[(BITCOIN_ALPHABET.index(char) + 1) % 58]
            mistyped = GENESIS_ADDRESS[:position] + replacement + GENESIS_ADDRESS[position + 1:]

            with pytest.raises((ChecksumMismatchError, MalformedInputError)):
                codec.decode_check(mistyped)

    def test_invalid_character(self, codec):
        with pytest.raises(InvalidCharacterError):
            codec.decode_check('1A1zP1eP5QGefi2DMPTfTL5SLmv7Divf0a')

    @pytest.mark.parametrize("text", ['', '1', '1111', '2g', 'a3gV'])
    def test_too_short(self, codec, text):
        """Test fewer than 5 decoded bytes is malformed"""
        with pytest.raises(MalformedInputError):
            codec.decode_check(text)

    def test_malformed_before_checksum(self, codec):
        """Test 4-byte prefix on a 1-byte-prefix address"""
        short = codec.encode_check(b'\x00', b'')

        assert codec.decode_check(short) == (b'\x00', b'')

        with pytest.raises(MalformedInputError) as exc_info:
            codec.decode_check(short, prefix_length=4)

        assert exc_info.value.details == {"length": 5, "minimum": 8}

    def test_extended_prefix(self, extended_codec):
        """Test 4-byte version prefix split"""
        payload = bytes(range(74))
        encoded = extended_codec.encode_check(XPUB_VERSION, payload)

        assert encoded.startswith('xpub')
        assert extended_codec.decode_check(encoded) == (XPUB_VERSION, payload)

    def test_prefix_length_parameter(self, codec):
        """Test explicit prefix length overrides the codec default"""
        encoded = codec.encode_check(b'\x01\x02\x03\x04', b'data')

        assert codec.decode_check(encoded) == (b'\x01', b'\x02\x03\x04data')
        assert codec.decode_check(encoded, prefix_length=4) == (b'\x01\x02\x03\x04', b'data')
        assert codec.decode_check(encoded, prefix_length=0) == (b'', b'\x01\x02\x03\x04data')

    def test_invalid_prefix_length(self, codec):
        with pytest.raises(ValueError):
            codec.decode_check(GENESIS_ADDRESS, prefix_length=-1)

        with pytest.raises(ValueError):
            Base58Check(prefix_length=-1)

    def test_leading_zero_prefix_and_payload(self, codec):
        """Test zero bytes in prefix and payload survive the round trip"""
        prefix = b'\x00'
        payload = b'\x00\x00\x00\x01'

        encoded = codec.encode_check(prefix, payload)

        assert encoded.startswith('1111')
        assert codec.decode_check(encoded) == (prefix, payload)

    def test_empty_prefix_and_payload(self, codec):
        encoded = codec.encode_check(b'', b'')

        assert codec.decode_check(encoded, prefix_length=0) == (b'', b'')


class TestCustomCodec:
    """Test non-default alphabets and checksums"""

    def test_ripple_alphabet(self):
        codec = Base58Check(alphabet=RIPPLE_ALPHABET)

        assert codec.encode(b'\x00\x01') == 'rp'
        assert codec.decode('rp') == b'\x00\x01'

        data = bytes(range(1, 40))
        assert codec.decode(codec.encode(data)) == data

    def test_bad_alphabet(self):
        with pytest.raises(InvalidAlphabetError):
            Base58Check(alphabet="0123456789")

    def test_custom_checksum_engine(self):
        from base58check.core.checksum import ChecksumEngine

        codec = Base58Check(checksum_engine=ChecksumEngine(length=8))
        encoded = codec.encode_check(b'\x00', GENESIS_HASH160)

        assert len(codec.decode(encoded)) == 1 + 20 + 8
        assert codec.decode_check(encoded) == (b'\x00', GENESIS_HASH160)

        with pytest.raises(ChecksumMismatchError):
            Base58Check().decode_check(encoded, prefix_length=5)

    def test_decode_check_defers_to_engine_verify(self):
        """Test decode_check accepts or rejects by the engine's verify"""
        from base58check.core.checksum import ChecksumEngine

        class RejectingEngine(ChecksumEngine):
            def __init__(self):
                super().__init__()
                self.calls = []

            def verify(self, versioned, checksum):
                self.calls.append((versioned, checksum))
                return False

        engine = RejectingEngine()
        codec = Base58Check(checksum_engine=engine)

        with pytest.raises(ChecksumMismatchError):
            codec.decode_check(GENESIS_ADDRESS)

        assert engine.calls == [(b'\x00' + GENESIS_HASH160, codec.decode(GENESIS_ADDRESS)[-4:])]


class TestModuleFunctions:
    """Test module-level API and the shared codec"""

    def test_package_exports(self):
        assert base58check.encode(b'hello') == 'Cn8eVZg'
        assert base58check.decode('Cn8eVZg') == b'hello'
        assert base58check.encode_check(b'\x00', GENESIS_HASH160) == GENESIS_ADDRESS
        assert base58check.decode_check(GENESIS_ADDRESS) == (b'\x00', GENESIS_HASH160)
        assert base58check.encode_int(58) == '21'
        assert base58check.decode_int('21') == 58
        assert base58check.encode_check_hex(0, GENESIS_HASH160.hex()) == GENESIS_ADDRESS

    def test_shared_codec_is_reused(self):
        assert get_codec() is get_codec()

    def test_shared_codec_follows_settings(self, monkeypatch):
        """Test prefix length from BASE58CHECK_PREFIX_LENGTH"""
        encoded = base58check.encode_check(XPUB_VERSION, b'payload')
        assert base58check.decode_check(encoded).prefix == XPUB_VERSION[:1]

        monkeypatch.setenv("BASE58CHECK_PREFIX_LENGTH", "4")
        reload_settings()

        assert get_codec().prefix_length == 4
        assert base58check.decode_check(encoded) == (XPUB_VERSION, b'payload')
