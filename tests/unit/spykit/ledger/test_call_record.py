import pytest
from pydantic import ValidationError

from spykit.core.exceptions.base import ArgumentPairsError
from spykit.ledger.call_record import CallRecord, pairs_to_dict, values_from_pairs


class TestPairsToDict:

    def test_keeps_insertion_order(self):
        assert list(pairs_to_dict("save", ("id", 7, "name", "x")).items()) == [("id", 7), ("name", "x")]

    def test_empty(self):
        assert pairs_to_dict("ping", ()) == {}

    def test_odd_number_of_items(self):
        with pytest.raises(ArgumentPairsError, match="save must be given as name, value pairs but 3"):
            pairs_to_dict("save", ("id", 7, "name"))

    def test_name_must_be_string(self):
        with pytest.raises(ArgumentPairsError, match="position 2 for save must be a str, got int"):
            pairs_to_dict("save", ("id", 7, 8, "x"))

    def test_repeated_name_keeps_position_and_last_value(self):
        assert list(pairs_to_dict("op", ("a", 1, "b", 2, "a", 3)).items()) == [("a", 3), ("b", 2)]

    def test_values_from_pairs(self):
        assert values_from_pairs("op", ("a", 1, "b", "two")) == (1, "two")

    def test_values_from_pairs_keeps_repeated_names(self):
        assert values_from_pairs("op", ("a", 1, "a", 2)) == (1, 2)

    def test_values_from_pairs_rejects_odd_input(self):
        with pytest.raises(ArgumentPairsError):
            values_from_pairs("op", ("a", 1, "b"))


class TestCallRecord:

    def test_from_pairs(self):
        record = CallRecord.from_pairs("save", ("id", 7, "name", "x"))

        assert record.operation == "save"
        assert list(record.as_dict()) == ["id", "name"]
        assert record.values == (7, "x")
        assert record.as_dict() == {"id": 7, "name": "x"}

    def test_values_keep_identity(self):
        payload = {"nested": [1, 2]}
        record = CallRecord.from_mapping("save", {"payload": payload})
        assert record.as_dict()["payload"] is payload

    def test_is_immutable(self):
        record = CallRecord.from_pairs("save", ("id", 7))
        with pytest.raises(ValidationError):
            record.operation = "other"

    def test_as_dict_returns_copy(self):
        record = CallRecord.from_pairs("save", ("id", 7))
        record.as_dict()["id"] = 8
        assert record.as_dict() == {"id": 7}

    def test_has_argument(self):
        record = CallRecord.from_pairs("save", ("id", None))
        assert record.has_argument("id")
        assert not record.has_argument("name")
