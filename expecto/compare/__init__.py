""" Comparators: deep equality, containment, and the value categories they rely on """

from .category import Category, category_of, record_items, is_object, is_nan
from .equal import deep_equal, same_value, same_value_zero
from .contains import object_contains, array_contains_equal, get_property, lookup_key
