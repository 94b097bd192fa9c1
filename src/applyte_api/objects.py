import copy
import dataclasses
from collections.abc import Mapping, MutableMapping
from typing import Any


@dataclasses.dataclass
class DiffResult:
    new: dict[str, Any] = dataclasses.field(default_factory=dict)
    old: dict[str, Any] = dataclasses.field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.new or self.old)


def diff(new: Mapping[str, Any], old: Mapping[str, Any]) -> DiffResult:
    """
    Reports what `new` changes about `old`, driven by the keys of `new` only.
    Keys missing from `old` show up in `new` alone. Sequences are compared as sets and,
    when `new` holds an element `old` lacks, both full sequences are reported.
    Nested mappings are diffed recursively and only non-empty sides are kept.
    """
    result = DiffResult()
    for key, value in new.items():
        if key not in old:
            result.new[key] = value
            continue
        previous = old[key]
        if _strictly_equal(value, previous):
            continue
        if _is_sequence(value) and _is_sequence(previous):
            if any(not _contains(previous, item) for item in value):
                result.new[key] = value
                result.old[key] = previous
        elif isinstance(value, Mapping) and isinstance(previous, Mapping):
            nested = diff(value, previous)
            if nested.new:
                result.new[key] = nested.new
            if nested.old:
                result.old[key] = nested.old
        else:
            result.new[key] = value
            result.old[key] = previous
    return result


def assign_deep(target: MutableMapping[str, Any], patch: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """
    Merges `patch` into `target` in place. Nested mappings merge key by key,
    everything else (sequences included) is replaced by a deep copy.
    """
    for key, value in patch.items():
        current = target.get(key)
        if isinstance(current, MutableMapping) and isinstance(value, Mapping):
            assign_deep(current, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def _strictly_equal(left: Any, right: Any) -> bool:
    # bool is an int subclass; True and 1 are different values here
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return bool(left == right)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _contains(sequence: Any, item: Any) -> bool:
    return any(_strictly_equal(item, candidate) for candidate in sequence)
