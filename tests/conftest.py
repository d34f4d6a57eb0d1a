"""Shared fixtures for the Conjugador test suite."""

import pytest

from conjugador.auxiliary import AuxiliaryTables
from conjugador.conjugator import Conjugator
from conjugador.verb import Verb


@pytest.fixture(scope="session")
def auxiliaries() -> AuxiliaryTables:
    """Tables of ter, haver, estar and ser, built once for the whole run."""
    return AuxiliaryTables.get_instance()


@pytest.fixture(scope="session")
def conjugate(auxiliaries):
    """Full table of an infinitive, all 25 tenses and four variants."""

    def _conjugate(infinitive: str):
        return Conjugator(Verb.parse(infinitive), auxiliaries).conjugate_all()

    return _conjugate
