from applyte_api.objects import DiffResult, assign_deep, diff


class TestDiff:
    def test_empty_new_object_reports_nothing(self) -> None:
        assert diff({}, {"a": 1, "b": {"c": 2}}) == DiffResult({}, {})

    def test_addition_only_appears_in_new(self) -> None:
        assert diff({"a": 1, "b": 2}, {"a": 1}) == DiffResult(new={"b": 2}, old={})

    def test_changed_scalars_are_reported_on_both_sides(self) -> None:
        assert diff({"a": 1, "b": "x"}, {"a": 2, "b": "x"}) == DiffResult(new={"a": 1}, old={"a": 2})

    def test_keys_only_in_old_are_ignored(self) -> None:
        assert diff({"a": 1}, {"a": 1, "gone": True}) == DiffResult({}, {})

    def test_array_with_new_element_reports_full_arrays(self) -> None:
        assert diff({"tags": ["x", "y"]}, {"tags": ["x"]}) == DiffResult(
            new={"tags": ["x", "y"]},
            old={"tags": ["x"]},
        )

    def test_equal_arrays_are_not_reported(self) -> None:
        assert diff({"tags": ["x"]}, {"tags": ["x"]}) == DiffResult({}, {})

    def test_reordered_array_is_not_reported(self) -> None:
        assert diff({"tags": ["y", "x"]}, {"tags": ["x", "y"]}) == DiffResult({}, {})

    def test_array_that_only_lost_elements_is_not_reported(self) -> None:
        assert diff({"tags": ["x"]}, {"tags": ["x", "y"]}) == DiffResult({}, {})

    def test_arrays_of_objects_compare_by_value(self) -> None:
        new = {"links": [{"name": "home", "url": "a"}]}
        old = {"links": [{"name": "home", "url": "a"}, {"name": "apply", "url": "b"}]}

        assert diff(new, old) == DiffResult({}, {})

    def test_nested_objects_are_diffed_recursively(self) -> None:
        result = diff({"addr": {"city": "A", "zip": "1"}}, {"addr": {"city": "B", "zip": "1"}})

        assert result == DiffResult(new={"addr": {"city": "A"}}, old={"addr": {"city": "B"}})

    def test_nested_addition_is_spliced_into_new_only(self) -> None:
        new = {"c": {"c1": 1, "c5": "added"}}
        old = {"c": {"c1": 1}}

        assert diff(new, old) == DiffResult(new={"c": {"c5": "added"}}, old={})

    def test_array_replaced_by_scalar_records_both(self) -> None:
        assert diff({"a": "now a string"}, {"a": [1, 2]}) == DiffResult(new={"a": "now a string"}, old={"a": [1, 2]})

    def test_boolean_and_number_are_different(self) -> None:
        assert diff({"flag": True}, {"flag": 1}) == DiffResult(new={"flag": True}, old={"flag": 1})

    def test_empty_result_is_falsy(self) -> None:
        assert not diff({"a": 1}, {"a": 1})
        assert diff({"a": 1}, {})


class TestAssignDeep:
    def test_partial_nested_update_preserves_siblings(self) -> None:
        target = {"addr": {"city": "A", "zip": "1"}}

        result = assign_deep(target, {"addr": {"city": "Z"}})

        assert result is target
        assert target == {"addr": {"city": "Z", "zip": "1"}}

    def test_arrays_are_replaced_wholesale(self) -> None:
        target = {"tags": ["a", "b", "c"], "name": "x"}

        assign_deep(target, {"tags": ["d"]})

        assert target == {"tags": ["d"], "name": "x"}

    def test_patch_values_are_not_aliased(self) -> None:
        values = [1, 2, 3]
        nested = {"deep": {"list": [4]}}
        target: dict = {}

        assign_deep(target, {"list": values, "obj": nested})
        values.append(4)
        nested["deep"]["list"].append(5)

        assert target == {"list": [1, 2, 3], "obj": {"deep": {"list": [4]}}}

    def test_object_replaces_scalar(self) -> None:
        target = {"address": None}

        assign_deep(target, {"address": {"city": "Boston"}})

        assert target == {"address": {"city": "Boston"}}

    def test_nested_merge_creates_missing_keys(self) -> None:
        target = {"a": {"b": {"c": 1}}}

        assign_deep(target, {"a": {"b": {"d": 2}, "e": 3}})

        assert target == {"a": {"b": {"c": 1, "d": 2}, "e": 3}}
