# flake8: noqa
from .eq_set import EqSet
from .ordered_set import OrderedSet
from .checks import (
    InvariantError,
    invariant_checks_enabled,
    pause_invariant_checks,
    continue_invariant_checks,
    stop_invariant_checks,
    no_invariant_checks,
)
from .verification import (
    check_property,
    random_lists,
    random_sets,
    property_settings,
    get_property_defaults,
    set_property_defaults,
)
from importlib.metadata import metadata

meta = metadata("eqset")
__version__ = meta["Version"]
__author__ = meta.get("Author", "")
__license__ = meta.get("License", "")
__email__ = meta.get("Author-email", "")
__program_name__ = meta["Name"]


__all__ = [
    "EqSet",
    "OrderedSet",
    "InvariantError",
    "invariant_checks_enabled",
    "pause_invariant_checks",
    "continue_invariant_checks",
    "stop_invariant_checks",
    "no_invariant_checks",
    "check_property",
    "random_lists",
    "random_sets",
    "property_settings",
    "get_property_defaults",
    "set_property_defaults",
]
