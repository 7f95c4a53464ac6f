"""Тесты публичных операций: derive_password, derive_password_range, encode_seed.

Покрытие:
- Эталонные векторы прошивки
- Детерминизм, длина и алфавит пароля
- DateRange: границы 365/366 дней, ленивость, перезапуск
- Порядок валидации и отсутствие частичных результатов
- SeedCipher: DES-токен, default seed, формат
"""

import re
from datetime import date

import pytest

from src.cipher import SeedCipher, encrypt_block, format_token
from src.core.config import PotdConfig
from src.core.domain import ALPHABET, DEFAULT_SEED, CalendarDate, ErrorKind, PotdValidationError
from src.pipeline import (
    DateRange,
    build_date_range,
    derive_password,
    derive_password_of_the_day,
    derive_password_range,
    encode_seed,
)


TOKEN_PATTERN = re.compile(r"^[0-9A-F]{2}(\.[0-9A-F]{2}){7}$")


def make_date(year: int, month: int, day: int) -> CalendarDate:
    """Helper: создает CalendarDate."""
    return CalendarDate(value=date(year, month, day))


# =============================================================================
# DERIVE PASSWORD
# =============================================================================


class TestDerivePassword:
    """Тесты derive_password."""

    @pytest.mark.parametrize(
        "day,seed,expected",
        [
            ("2021-12-25", DEFAULT_SEED, "ZCARK8TPK5"),
            ("2021-12-25", "1122AABB", "FEWNX8OS0O"),
            ("1960-10-22", DEFAULT_SEED, "WGAR88TPKS"),
            ("2021-12-26", DEFAULT_SEED, "ZOU3MLLZO4"),
        ],
    )
    def test_known_vectors(self, day, seed, expected):
        assert derive_password(day, seed).unwrap() == expected

    def test_four_char_seed_padded_cyclically(self):
        """ABCD → ABCDABCDAB на всем пути derivation."""
        # date key (34,27,16,23,30,25,8,4), checksum 15, selector 3
        assert derive_password("2021-12-25", "ABCD").unwrap() == "WDE5E96WGL"

    def test_default_seed_is_default_argument(self):
        assert derive_password("2021-12-25").unwrap() == "ZCARK8TPK5"

    def test_deterministic(self):
        first = derive_password("2023-03-14", "ABCDEFG").unwrap()
        for _ in range(5):
            assert derive_password("2023-03-14", "ABCDEFG").unwrap() == first

    @pytest.mark.parametrize("seed", ["ABCD", "zzzz", "a1b2c3", "~!@#$%^&", DEFAULT_SEED])
    def test_length_and_alphabet(self, seed):
        for day in ("2000-01-01", "2016-02-29", "2099-12-31", "1970-06-15"):
            password = derive_password(day, seed).unwrap()
            assert len(password) == 10
            assert all(ch in ALPHABET for ch in password)

    @pytest.mark.parametrize("seed,ok", [("ABC", False), ("ABCD", True), ("ABCDEFGH", True), ("ABCDEFGHI", False)])
    def test_seed_bounds(self, seed, ok):
        result = derive_password("1960-10-22", seed)

        assert result.ok is ok
        if not ok:
            assert result.error.kind == ErrorKind.INVALID_SEED_LENGTH

    def test_invalid_date_format(self):
        result = derive_password("Phoenix dactylifera", DEFAULT_SEED)
        assert result.error.kind == ErrorKind.INVALID_DATE_FORMAT

    def test_invalid_date_value(self):
        result = derive_password("2021-12-40", DEFAULT_SEED)
        assert result.error.kind == ErrorKind.INVALID_DATE_VALUE

    def test_date_validated_before_seed(self):
        result = derive_password("2021-14-01", "ABC")
        assert result.error.kind == ErrorKind.INVALID_DATE_VALUE

    def test_unwrap_raises(self):
        with pytest.raises(PotdValidationError, match="InvalidSeedLength"):
            derive_password("2021-12-25", "ABC").unwrap()

    def test_password_of_the_day_model(self):
        potd = derive_password_of_the_day("2021-12-25").unwrap()

        assert potd.date == "2021-12-25"
        assert potd.password == "ZCARK8TPK5"

    def test_password_of_the_day_error(self):
        result = derive_password_of_the_day("2021-12-25", "AB")
        assert result.error.kind == ErrorKind.INVALID_SEED_LENGTH


# =============================================================================
# DATE RANGE
# =============================================================================


class TestDateRange:
    """Тесты DateRange и build_date_range."""

    def test_inclusive_iteration(self):
        date_range = DateRange(begin=make_date(2021, 12, 30), end=make_date(2022, 1, 2))

        days = [d.isoformat() for d in date_range]
        assert days == ["2021-12-30", "2021-12-31", "2022-01-01", "2022-01-02"]
        assert len(date_range) == 4

    def test_restartable(self):
        date_range = DateRange(begin=make_date(2021, 12, 25), end=make_date(2021, 12, 27))
        assert list(date_range) == list(date_range)

    def test_lazy(self):
        date_range = DateRange(begin=make_date(2021, 1, 1), end=make_date(2021, 12, 31))
        first = next(iter(date_range))
        assert first.isoformat() == "2021-01-01"

    def test_ends_on_last_calendar_day(self):
        date_range = DateRange(begin=make_date(9999, 12, 30), end=make_date(9999, 12, 31))

        days = [d.isoformat() for d in date_range]
        assert days == ["9999-12-30", "9999-12-31"]
        assert len(date_range) == 2

    def test_starts_on_first_calendar_day(self):
        date_range = DateRange(begin=make_date(1, 1, 1), end=make_date(1, 1, 3))
        assert [d.isoformat() for d in date_range] == ["0001-01-01", "0001-01-02", "0001-01-03"]

    def test_same_day_rejected(self):
        result = build_date_range(make_date(2021, 12, 25), make_date(2021, 12, 25))
        assert result.error.kind == ErrorKind.INVALID_DATE_RANGE

    def test_reversed_rejected(self):
        result = build_date_range(make_date(2021, 12, 26), make_date(2021, 12, 25))
        assert result.error.kind == ErrorKind.INVALID_DATE_RANGE

    def test_365_days_accepted(self):
        result = build_date_range(make_date(2021, 1, 1), make_date(2022, 1, 1))

        assert result.ok
        assert result.unwrap().span_days == 365
        assert len(result.unwrap()) == 366

    def test_366_days_rejected(self):
        result = build_date_range(make_date(2021, 1, 1), make_date(2022, 1, 2))
        assert result.error.kind == ErrorKind.INVALID_DATE_RANGE

    def test_custom_max_span(self):
        config = PotdConfig(max_range_days=7)

        assert build_date_range(make_date(2021, 1, 1), make_date(2021, 1, 8), config).ok
        assert not build_date_range(make_date(2021, 1, 1), make_date(2021, 1, 9), config).ok


class TestDerivePasswordRange:
    """Тесты derive_password_range."""

    def test_small_multiple(self):
        result = derive_password_range("2021-12-25", "2021-12-26", DEFAULT_SEED)

        assert result.unwrap() == {
            "2021-12-25": "ZCARK8TPK5",
            "2021-12-26": "ZOU3MLLZO4",
        }

    def test_entries_match_single_derivation(self):
        passwords = derive_password_range("2021-02-20", "2021-03-05", "1122AABB").unwrap()

        assert len(passwords) == 14
        for day, password in passwords.items():
            assert derive_password(day, "1122AABB").unwrap() == password

    def test_ascending_order(self):
        passwords = derive_password_range("2020-12-30", "2021-01-03").unwrap()
        keys = list(passwords)
        assert keys == sorted(keys)
        assert keys[0] == "2020-12-30"
        assert keys[-1] == "2021-01-03"

    def test_full_year(self):
        passwords = derive_password_range("2020-01-01", "2020-12-31").unwrap()
        assert len(passwords) == 366

    def test_range_ending_on_last_calendar_day(self):
        passwords = derive_password_range("9999-12-30", "9999-12-31", "ABCD").unwrap()

        assert list(passwords) == ["9999-12-30", "9999-12-31"]
        assert passwords["9999-12-31"] == derive_password("9999-12-31", "ABCD").unwrap()

    def test_reversed_range(self):
        result = derive_password_range("2021-12-26", "2021-12-25", DEFAULT_SEED)
        assert result.error.kind == ErrorKind.INVALID_DATE_RANGE

    def test_exceeds_year(self):
        result = derive_password_range("2021-12-25", "2022-12-26", DEFAULT_SEED)
        assert result.error.kind == ErrorKind.INVALID_DATE_RANGE

    def test_invalid_begin_reported_first(self):
        result = derive_password_range("2021-13-01", "bad", "A")
        assert result.error.kind == ErrorKind.INVALID_DATE_VALUE

    def test_invalid_end(self):
        result = derive_password_range("2021-12-25", "bad")
        assert result.error.kind == ErrorKind.INVALID_DATE_FORMAT

    def test_range_validated_before_seed(self):
        result = derive_password_range("2021-12-26", "2021-12-25", "A")
        assert result.error.kind == ErrorKind.INVALID_DATE_RANGE

    def test_invalid_seed(self):
        result = derive_password_range("2021-12-25", "2021-12-26", "ABCABCABC")

        assert result.error.kind == ErrorKind.INVALID_SEED_LENGTH
        assert result.value is None


# =============================================================================
# SEED CIPHER
# =============================================================================


class TestEncodeSeed:
    """Тесты encode_seed и SeedCipher."""

    def test_known_vector(self):
        assert encode_seed("ABCD").unwrap() == "3F.94.E2.AA.46.63.AA.78"

    def test_default_seed_constant(self):
        assert encode_seed(DEFAULT_SEED).unwrap() == "DB.B5.CB.D6.11.17.D6.EB"

    @pytest.mark.parametrize("seed", ["ABCD", "1122AABB", "asdf", "Zz9~x"])
    def test_format(self, seed):
        token = encode_seed(seed).unwrap()

        assert len(token) == 23
        assert TOKEN_PATTERN.match(token)
        assert not token.endswith(".")

    def test_deterministic(self):
        assert encode_seed("1122AABB").unwrap() == encode_seed("1122AABB").unwrap()

    def test_distinct_seeds_distinct_tokens(self):
        assert encode_seed("ABCD").unwrap() != encode_seed("ABCE").unwrap()

    def test_uses_raw_seed_not_normalized(self):
        """Zero-padding seed, а не циклическое дополнение."""
        assert encode_seed("ABCD").unwrap() == format_token(encrypt_block(b"ABCD\x00\x00\x00\x00"))

    @pytest.mark.parametrize("seed", ["ABC", "ABCDEFGHI", ""])
    def test_invalid_length(self, seed):
        assert encode_seed(seed).error.kind == ErrorKind.INVALID_SEED_LENGTH

    def test_non_ascii(self):
        assert encode_seed("ÄBCD").error.kind == ErrorKind.INVALID_SEED_CHARACTERS

    def test_format_token_pads_single_digit(self):
        assert format_token(bytes([0, 1, 10, 255])) == "00.01.0A.FF"

    def test_encrypt_block_wrong_size(self):
        with pytest.raises(ValueError, match="block must be 8 bytes"):
            encrypt_block(b"ABCD")

    def test_cipher_custom_config(self):
        cipher = SeedCipher(PotdConfig(seed_min_length=6))
        assert cipher.encode("ABCD").error.kind == ErrorKind.INVALID_SEED_LENGTH
