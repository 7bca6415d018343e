"""Loader for the counter-mode KBKDF reference vectors."""

import json
import pathlib

import pytest

VECTORS = pathlib.Path(__file__).resolve().parent / "vectors"


def load_suites():
    with open(VECTORS / "kbkdf_counter.json", "r", encoding="utf-8") as fh:
        return json.load(fh)


def find_suite(prf, location, r_len):
    for suite in load_suites():
        if (suite["prf"], suite["counterLocation"], suite["rLen"]) == (prf, location, r_len):
            return suite
    raise LookupError(f"no vectors for {prf} {location} r={r_len}")


def iter_cases():
    """Yield (prf, counterLocation, rLen, test) for every vector."""
    for suite in load_suites():
        for test in suite["tests"]:
            yield suite["prf"], suite["counterLocation"], suite["rLen"], test


def case_id(case):
    prf, location, r_len, test = case
    return f"{prf}-{location}-r{r_len}-{test['COUNT']}"


def counter_params():
    return [pytest.param(*case, id=case_id(case)) for case in iter_cases()]
