"""Hand-tuned scoring constants for the matching engine.

Every weight, cap, baseline and threshold the scorers use lives here so that
retuning is a one-line change.
"""

import math
from typing import Dict

# Aggregate weights. Must sum to 1.0.
WEIGHTS: Dict[str, float] = {
    "education": 0.25,
    "skills": 0.35,
    "experience": 0.25,
    "training": 0.15,
}

GOOD_FIT_THRESHOLD = 75
# Lower bound of the "partial" quality label
PARTIAL_FIT_THRESHOLD = 50

MIN_SCORE = 0
MAX_SCORE = 100

# Education
EDUCATION_LEVEL_POINTS = 50
MAJOR_POINTS = 50
NO_MAJOR_REQUIREMENT_POINTS = 30

# Skills
UNSPECIFIED_SKILLS_SCORE = 60
SKILL_MATCH_POINTS = 80
PROFICIENCY_BONUS = {"Expert": 5, "Advanced": 3}
PROFICIENCY_BONUS_CAP = 20

# Experience
NO_EXPERIENCE_SCORE = 20
POINTS_PER_YEAR = 8
YEARS_POINTS_CAP = 40
RELEVANCE_POINTS = 60
DESCRIPTION_RELEVANCE_FACTOR = 0.5

# Training
NO_TRAINING_SCORE = 30
POINTS_PER_TRAINING = 10
TRAINING_COUNT_CAP = 40
KEYWORD_HIT_POINTS = 15
KEYWORD_POINTS_CAP = 60
MIN_KEYWORD_LENGTH = 4

if not math.isclose(sum(WEIGHTS.values()), 1.0):
    raise RuntimeError(f"Scoring weights must sum to 1.0, got: {sum(WEIGHTS.values())}")
