"""
Unit tests for ClassLayoutParser.
Covers both schema versions, bitfields, markers and schema errors.
"""

import json

import pytest

from dumpspace_api.domain.models.layout import MemberKey, MemberOffset, SchemaVersion
from dumpspace_api.domain.services.parsing import ClassLayoutParser
from dumpspace_api.errors import SchemaError

DOCUMENT = "Unreal-Engine-5/Fortnite/ClassesInfo.json.gz"


def document_with(version: int, *groups: dict) -> str:
    return json.dumps({"version": version, "data": list(groups)})


class TestClassLayoutParser:
    """Test suite for ClassLayoutParser functionality."""

    @pytest.fixture
    def parser(self) -> ClassLayoutParser:
        return ClassLayoutParser()

    @pytest.mark.unit
    def test_v2_bitfield_member(self, parser, classes_v2):
        """The AExample.Flags1 scenario: [_, 0x10, 4, 0, 2] under version 10202."""
        parsed = parser.parse(json.dumps(classes_v2), DOCUMENT)
        members = dict(parsed.members)

        assert parsed.version is SchemaVersion.V2
        assert members[MemberKey("AExample", "Flags1")] == MemberOffset(
            offset=0x10, size=4, is_bitfield=True, bit_offset=2, is_resolved=True
        )
        assert MemberKey("AExample", "Flags1").concatenated == "AExampleFlags1"

    @pytest.mark.unit
    def test_v2_plain_member(self, parser, classes_v2):
        parsed = parser.parse(json.dumps(classes_v2), DOCUMENT)
        info = dict(parsed.members)[MemberKey("UWorld", "OwningGameInstance")]

        assert info.offset == 0x228
        assert info.size == 8
        assert info.is_bitfield is False
        assert info.bit_offset == 0
        assert info.is_resolved is True

    @pytest.mark.unit
    def test_every_member_record_yields_one_entry(self, parser, classes_v2):
        """Size and inheritance records produce no member entries."""
        parsed = parser.parse(json.dumps(classes_v2), DOCUMENT)

        assert [key.member_name for key, _ in parsed.members] == [
            "RootComponent",
            "Flags1",
            "Flags2",
            "OwningGameInstance",
        ]
        assert all(info.is_resolved for _, info in parsed.members)

    @pytest.mark.unit
    def test_type_sizes(self, parser, classes_v2):
        parsed = parser.parse(json.dumps(classes_v2), DOCUMENT)
        assert parsed.type_sizes == [("AExample", 0x40), ("UWorld", 2536)]

    @pytest.mark.unit
    def test_size_marker_as_single_element_array(self, parser):
        text = document_with(10202, {"FSmall": [{"__MDKClassSize": [12]}]})
        assert parser.parse(text, DOCUMENT).type_sizes == [("FSmall", 12)]

    @pytest.mark.unit
    def test_size_marker_array_with_two_elements_is_rejected(self, parser):
        text = document_with(10202, {"FSmall": [{"__MDKClassSize": [12, 4]}]})
        with pytest.raises(SchemaError, match="FSmall.__MDKClassSize"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_v1_bitfield_strips_suffix(self, parser, classes_v1):
        parsed = parser.parse(json.dumps(classes_v1), DOCUMENT)
        members = dict(parsed.members)

        assert parsed.version is SchemaVersion.V1
        assert members[MemberKey("AOldActor", "bHidden")] == MemberOffset(
            offset=0x58, size=1, is_bitfield=True, bit_offset=4, is_resolved=True
        )
        assert MemberKey("AOldActor", "bHidden : 1") not in members

    @pytest.mark.unit
    def test_v1_plain_member_keeps_name(self, parser, classes_v1):
        members = dict(parser.parse(json.dumps(classes_v1), DOCUMENT).members)
        assert members[MemberKey("AOldActor", "Health")].offset == 0x220

    @pytest.mark.unit
    def test_v2_bitfield_name_is_not_stripped(self, parser):
        text = document_with(10202, {"AThing": [{"bFlag : 1": ["uint8", 4, 1, 0, 7]}]})
        (key, info), = parser.parse(text, DOCUMENT).members

        assert key == MemberKey("AThing", "bFlag : 1")
        assert info.bit_offset == 7

    @pytest.mark.unit
    def test_v1_bitfield_name_shorter_than_suffix(self, parser):
        text = document_with(10201, {"AThing": [{"b:1": ["uint8", 4, 1, 0]}]})
        with pytest.raises(SchemaError, match="too short"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("version", "length", "is_bitfield"),
        [(10201, 3, False), (10201, 4, True), (10202, 4, False), (10202, 5, True)],
    )
    def test_bitfield_detection_by_version_and_length(self, parser, version, length, is_bitfield):
        fields = ["int32", 0x20, 4] + [1] * (length - 3)
        text = document_with(version, {"AThing": [{"MemberName": fields}]})
        (_, info), = parser.parse(text, DOCUMENT).members
        assert info.is_bitfield is is_bitfield

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("version", "length"),
        [(10201, 2), (10201, 5), (10202, 3), (10202, 6), (10202, 0)],
    )
    def test_invalid_member_length(self, parser, version, length):
        fields = ["int32", 0x20, 4, 0, 0, 0][:length]
        text = document_with(version, {"AThing": [{"MemberName": fields}]})
        with pytest.raises(SchemaError, match="length"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    @pytest.mark.parametrize("version", [10200, 10203, 0, "10202", None, True])
    def test_unknown_version(self, parser, version):
        text = json.dumps({"version": version, "data": []})
        with pytest.raises(SchemaError, match="unsupported schema version"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_missing_version(self, parser):
        with pytest.raises(SchemaError):
            parser.parse(json.dumps({"data": []}), DOCUMENT)

    @pytest.mark.unit
    def test_record_with_two_keys(self, parser):
        text = document_with(
            10202, {"AThing": [{"A": ["int32", 0, 4, 0], "B": ["int32", 4, 4, 0]}]}
        )
        with pytest.raises(SchemaError, match="exactly one key"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_empty_record(self, parser):
        with pytest.raises(SchemaError, match="exactly one key"):
            parser.parse(document_with(10202, {"AThing": [{}]}), DOCUMENT)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fields",
        [
            ["int32", "0x20", 4, 0],
            ["int32", 0x20, 4.0, 0],
            ["int32", True, 4, 0],
            ["int32", 0x20, None, 0],
        ],
    )
    def test_non_integer_offset_or_size(self, parser, fields):
        text = document_with(10202, {"AThing": [{"Member": fields}]})
        with pytest.raises(SchemaError, match="expected integer"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_non_integer_bit_offset(self, parser):
        text = document_with(10202, {"AThing": [{"Member": ["uint8", 1, 1, 0, "2"]}]})
        with pytest.raises(SchemaError, match="bit offset"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_member_value_not_an_array(self, parser):
        text = document_with(10202, {"AThing": [{"Member": {"offset": 1}}]})
        with pytest.raises(SchemaError, match="expected array"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_group_not_an_object(self, parser):
        text = json.dumps({"version": 10202, "data": [["AThing"]]})
        with pytest.raises(SchemaError, match=r"data\[0\]"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_invalid_json(self, parser):
        with pytest.raises(SchemaError, match="invalid JSON"):
            parser.parse("{not json", DOCUMENT)

    @pytest.mark.unit
    def test_missing_data(self, parser):
        with pytest.raises(SchemaError, match="missing 'data'"):
            parser.parse(json.dumps({"version": 10202}), DOCUMENT)

    @pytest.mark.unit
    def test_error_names_the_document(self, parser):
        with pytest.raises(SchemaError) as excinfo:
            parser.parse(json.dumps({"version": 1, "data": []}), DOCUMENT)

        assert excinfo.value.document == DOCUMENT
        assert DOCUMENT in str(excinfo.value)

    @pytest.mark.unit
    def test_negative_offset_is_kept(self, parser):
        text = document_with(10202, {"AThing": [{"Before": ["int32", -8, 4, 0]}]})
        (_, info), = parser.parse(text, DOCUMENT).members
        assert info.offset == -8

    @pytest.mark.unit
    def test_multiple_types_in_one_group(self, parser):
        text = document_with(
            10202,
            {
                "FA": [{"__MDKClassSize": 4}],
                "FB": [{"__MDKClassSize": 8}],
            },
        )
        assert parser.parse(text, DOCUMENT).type_sizes == [("FA", 4), ("FB", 8)]

    @pytest.mark.unit
    def test_duplicate_member_key(self, parser):
        text = '{"version":10202,"data":[{"A":[{"X":["t",1,4,0],"X":["t",2,4,0]}]}]}'
        with pytest.raises(SchemaError, match="duplicate key 'X'"):
            parser.parse(text, DOCUMENT)

    @pytest.mark.unit
    def test_duplicate_type_key_in_group(self, parser):
        text = '{"version":10202,"data":[{"A":[{"__MDKClassSize":8}],"A":[{"__MDKClassSize":16}]}]}'
        with pytest.raises(SchemaError, match="duplicate key 'A'"):
            parser.parse(text, DOCUMENT)
