from .errors import (
    LocationListsError,
    NotFoundError,
    InputIOError,
    FormatError,
    ParseError,
    LengthMismatchError,
    SelfCheckError,
)
from .loader import load_locations
from .models import Locations, Report
from .parser import parse_line
from .reducers import distance_sum, similarity_score
from .tokenizer import tokenize
