from adapters.coordinate_lists.loader import load_coordinate_csv, load_coordinate_json, load_coordinates
from adapters.coordinate_lists.models import CoordinateListFile, CoordinateRow

__all__ = [
    "CoordinateListFile",
    "CoordinateRow",
    "load_coordinate_csv",
    "load_coordinate_json",
    "load_coordinates",
]
