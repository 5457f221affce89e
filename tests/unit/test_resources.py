"""
Unit tests for in-memory and file resources.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from datareader.batch.readers import FormatReader, JSONReader
from datareader.batch.resources import ArrayData, File, Resource
from datareader.core.exceptions import ConfigurationError, ResourceError
from datareader.core.models import Drop, Keep
from datareader.core.transformers import HeaderSkippingTransformer, IdentityTransformer, Transformer


class Upper(Transformer):
    def configure_item(self, record):
        return Keep(record=record.upper())

    def configure_first_item(self, record):
        return Keep(record=record.upper())


class HandleRecordingReader(FormatReader):
    """Keeps the handle it was given; optionally fails like a decode error."""

    format_name = "recording"

    def __init__(self, fail: bool = False):
        super().__init__()
        self.fail = fail
        self.handle = None

    def read(self, handle, transformer):
        self.handle = handle
        if self.fail:
            raise ResourceError("cannot decode", reason="test")
        return [handle.read()]


class TestArrayData:
    """Tests for ArrayData"""

    def test_apply_preserves_order(self):
        resource = ArrayData(["b", "a", "c"])
        assert resource.apply(Upper()) == ["B", "A", "C"]
        assert resource.get_data() == ["B", "A", "C"]

    def test_data_is_empty_before_apply(self):
        assert ArrayData([1, 2]).get_data() == []

    def test_each_apply_replaces_previous_result(self):
        resource = ArrayData(["x", "y", "z"])
        resource.apply(IdentityTransformer())
        resource.apply(HeaderSkippingTransformer())

        assert resource.get_data() == ["y", "z"]
        assert resource.dropped_count == 1

    def test_backing_data_is_not_modified(self):
        source = ["a", "b"]
        resource = ArrayData(source)
        resource.apply(Upper())

        assert source == ["a", "b"]
        assert resource.raw_data == ["a", "b"]

    def test_missing_transformer(self):
        with pytest.raises(ConfigurationError):
            ArrayData([1]).apply(None)

    def test_empty_source(self):
        resource = ArrayData()
        assert resource.apply(IdentityTransformer()) == []
        assert len(resource) == 0

    def test_accepts_any_iterable(self):
        assert ArrayData(n for n in range(3)).apply(IdentityTransformer()) == [0, 1, 2]

    def test_failed_apply_keeps_previous_result(self):
        class Explode(Transformer):
            def configure_item(self, record):
                raise RuntimeError("boom")

            def configure_first_item(self, record):
                return Keep(record=record)

        resource = ArrayData([1, 2])
        resource.apply(IdentityTransformer())

        with pytest.raises(RuntimeError):
            resource.apply(Explode())
        assert resource.get_data() == [1, 2]

    @given(st.lists(st.text(), min_size=1))
    def test_property_dropping_first_yields_rest(self, records):
        resource = ArrayData(records)
        assert resource.apply(HeaderSkippingTransformer()) == records[1:]

    @given(st.lists(st.integers()))
    def test_property_drop_everything_yields_empty(self, records):
        class DropAll(Transformer):
            def configure_item(self, record):
                return Drop()

            def configure_first_item(self, record):
                return Drop()

        resource = ArrayData(records)
        assert resource.apply(DropAll()) == []
        assert resource.dropped_count == len(records)


class TestResourceContract:

    def test_set_data_rejects_non_list(self):
        with pytest.raises(ResourceError, match="must be a list"):
            ArrayData().set_data(("a", "b"))

    def test_resource_is_abstract(self):
        with pytest.raises(TypeError):
            Resource()


class TestFile:
    """Tests for File"""

    def test_reads_through_format_reader(self, write_file):
        path = write_file("data.json", '[{"a": 1}, {"a": 2}]')
        resource = File(path, JSONReader())

        assert resource.apply(IdentityTransformer()) == [{"a": 1}, {"a": 2}]
        assert resource.name == str(path)

    def test_missing_file_checked_on_apply(self, tmp_path):
        resource = File(tmp_path / "missing.json", JSONReader())

        with pytest.raises(ResourceError) as exc_info:
            resource.apply(IdentityTransformer())

        assert exc_info.value.reason == "not_found"
        assert str(tmp_path / "missing.json") in str(exc_info.value)

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(ResourceError) as exc_info:
            File(tmp_path, JSONReader()).apply(IdentityTransformer())

        assert exc_info.value.reason == "not_a_file"

    def test_missing_transformer(self, write_file):
        path = write_file("data.json", "[]")
        with pytest.raises(ConfigurationError):
            File(path, JSONReader()).apply(None)

    def test_missing_format_reader(self, tmp_path):
        with pytest.raises(ConfigurationError):
            File(tmp_path / "x.json", None)

    def test_decode_failure_keeps_previous_result(self, write_file):
        path = write_file("data.json", '[{"a": 1}]')
        resource = File(path, JSONReader())
        resource.apply(IdentityTransformer())

        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(ResourceError):
            resource.apply(IdentityTransformer())

        assert resource.get_data() == [{"a": 1}]

    def test_handle_closed_after_success(self, write_file):
        format_reader = HandleRecordingReader()
        File(write_file("data.txt", "x"), format_reader).apply(IdentityTransformer())

        assert format_reader.handle is not None
        assert format_reader.handle.closed

    def test_handle_closed_after_decode_failure(self, write_file):
        format_reader = HandleRecordingReader(fail=True)

        with pytest.raises(ResourceError, match="cannot decode"):
            File(write_file("data.txt", "x"), format_reader).apply(IdentityTransformer())

        assert format_reader.handle.closed

    def test_utf8_bom_is_ignored(self, tmp_path):
        path = tmp_path / "bom.json"
        path.write_bytes(b"\xef\xbb\xbf" + b'[{"a": 1}]')

        assert File(path, JSONReader()).apply(IdentityTransformer()) == [{"a": 1}]

    def test_wrong_encoding(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes('[{"name": "Bjørn"}]'.encode("latin-1"))

        with pytest.raises(ResourceError):
            File(path, JSONReader()).apply(IdentityTransformer())

        assert File(path, JSONReader(), encoding="latin-1").apply(IdentityTransformer()) == [{"name": "Bjørn"}]
