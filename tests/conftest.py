"""Root conftest — shared fixtures and environment isolation.

Invariants:
    - No test sees PASSPORT_CHECK_* variables from the developer's shell
    - get_settings() cache cleared around every test
    - Root logger handlers restored after every test (main() installs one)
"""

import logging
import os

import pytest

from passport_check.config import get_settings


# Two records structurally valid (#0, #2); only #0 also has valid values
# (#2 has hgt:179in). #1 lacks hgt, #3 lacks byr.
FOUR_RECORD_BATCH = """\
ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
byr:1937 iyr:2017 cid:147 hgt:183cm

iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
hcl:#cfa07d byr:1929

hcl:#ae17e1 iyr:2013
eyr:2024
ecl:brn pid:760753108 byr:1931
hgt:179in

hcl:#cfa07d eyr:2025 pid:166559648
iyr:2011 ecl:brn hgt:59in
"""

# Every key present, every record fails at least one value
INVALID_VALUES_BATCH = """\
eyr:1972 cid:100
hcl:#18171d ecl:amb hgt:170 pid:186cm iyr:2018 byr:1926

iyr:2019
hcl:#602927 eyr:1967 hgt:170cm
ecl:grn pid:012533040 byr:1946

hcl:dab227 iyr:2012
ecl:brn hgt:182cm pid:021572410 eyr:2020 byr:1992 cid:277

hgt:59cm ecl:zzz
eyr:2038 hcl:74454a iyr:2023
pid:3556412378 byr:2007
"""

VALID_VALUES_BATCH = """\
pid:087499704 hgt:74in ecl:grn iyr:2012 eyr:2030 byr:1980
hcl:#623a2f

eyr:2029 ecl:blu cid:129 byr:1989
iyr:2014 pid:896056539 hcl:#a97842 hgt:165cm

hcl:#888785
hgt:164cm byr:2001 iyr:2015 cid:88
pid:545766238 ecl:hzl
eyr:2022

iyr:2010 hgt:158cm hcl:#b6652c ecl:blu byr:1944 eyr:2021 pid:093154719
"""


@pytest.fixture
def four_record_batch() -> str:
    return FOUR_RECORD_BATCH


@pytest.fixture
def invalid_values_batch() -> str:
    return INVALID_VALUES_BATCH


@pytest.fixture
def valid_values_batch() -> str:
    return VALID_VALUES_BATCH


@pytest.fixture
def complete_record() -> dict[str, str]:
    """Exactly the required fields, all with valid values."""
    return {
        "byr": "1980",
        "iyr": "2012",
        "eyr": "2030",
        "hgt": "74in",
        "hcl": "#623a2f",
        "ecl": "grn",
        "pid": "087499704",
    }


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("PASSPORT_CHECK_"):
            monkeypatch.delenv(key)
    # No stray .env from the working directory
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
