"""Input document — dataclasses, parsing, validation, and serialization."""

from .models import Category, Organization, VennData, DataError
from .parsing import parse_venn_data, load_venn_data
from .validation import validate_venn_data
from .serialization import venn_data_to_dict

__all__ = [
    # Models
    "Category", "Organization", "VennData", "DataError",
    # Parsing / Validation / Serialization
    "parse_venn_data", "load_venn_data", "validate_venn_data", "venn_data_to_dict",
]
