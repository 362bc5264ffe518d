# config.py

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

VERSION = "1.0.0"

DEFAULT_OTHER_LABEL = "Other Fees"


@dataclass(frozen=True)
class AidRatesConfig:
    """
    Constants behind the simplified federal aid estimate.

    These approximate the 2024-2025 award year and are intentionally
    simplified; they are not the real FAFSA methodology.
    """
    year_label: str
    income_protection: Dict[int, int]     # household size -> allowance
    dependent_rate: float                 # assessment rate on available income
    independent_rate: float
    max_pell: int
    pell_efc_cutoff: int
    pell_reduction_rate: float
    dependent_loan_limit: int
    independent_loan_limit: int
    independent_age: int                  # age at which the higher loan limit applies

    @property
    def max_income_protection(self) -> int:
        return self.income_protection[max(self.income_protection)]


DEFAULT_AID_RATES = AidRatesConfig(
    year_label="2024-2025",
    income_protection={
        1: 17040,
        2: 21330,
        3: 26520,
        4: 32710,
        5: 38490,
        6: 44780,
    },
    dependent_rate=0.47,
    independent_rate=0.50,
    max_pell=7395,
    pell_efc_cutoff=6656,
    pell_reduction_rate=0.3,
    dependent_loan_limit=5500,
    independent_loan_limit=12500,
    independent_age=24,
)


@dataclass(frozen=True)
class ValidationBounds:
    min_age: int = 16
    max_age: int = 100
    min_household: int = 1
    max_household: int = 20


DEFAULT_BOUNDS = ValidationBounds()


# Seeded into a fresh settings file; never overwrites saved courses.
DEFAULT_COURSES: Dict[str, dict] = {
    "cosmetology": {
        "name": "Cosmetology",
        "price": 15000,
        "hours": 1500,
        "books_price": 500,
        "supplies_price": 750,
        "other_price": 0,
        "other_label": DEFAULT_OTHER_LABEL,
    },
    "barbering": {
        "name": "Barbering",
        "price": 12000,
        "hours": 1200,
        "books_price": 400,
        "supplies_price": 600,
        "other_price": 0,
        "other_label": DEFAULT_OTHER_LABEL,
    },
    "esthetics": {
        "name": "Esthetics (Skincare)",
        "price": 8000,
        "hours": 600,
        "books_price": 300,
        "supplies_price": 400,
        "other_price": 0,
        "other_label": DEFAULT_OTHER_LABEL,
    },
    "massage": {
        "name": "Massage Therapy",
        "price": 10000,
        "hours": 750,
        "books_price": 350,
        "supplies_price": 300,
        "other_price": 0,
        "other_label": DEFAULT_OTHER_LABEL,
    },
}


def get_settings_path() -> Path:
    """
    Location of the JSON settings file.

    Override with BSC_SETTINGS_PATH, otherwise it lives in the user's home.
    """
    override = os.environ.get("BSC_SETTINGS_PATH")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".beauty_school_calculator" / "settings.json"


def configure_logging() -> None:
    level = os.environ.get("BSC_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
