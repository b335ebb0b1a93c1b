"""Tests for TOML manifest parsing, serialization and file I/O."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest

from binventory.core.checksum import Checksum
from binventory.core.inventory import Inventory
from binventory.errors import (
    ManifestError,
    ManifestFormatError,
    ManifestReadError,
    ManifestWriteError,
)
from binventory.manifest import (
    parse_manifest,
    read_manifest,
    serialize_manifest,
    write_manifest,
)
from binventory.models.platform import Arch, Os

MANIFEST = """
[[artifacts]]
version = "2.0.0"
os = "linux"
arch = "amd64"
url = "https://example.com/tool-2.0.0-linux-amd64.tar.gz"
checksum = "sha256:cafebabe"

[[artifacts]]
version = "1.0.0"
os = "osx"
arch = "aarch64"
url = "https://example.com/tool-1.0.0-darwin-arm64.tar.gz"
checksum = "DEADBEEF"

[artifacts.metadata]
channel = "stable"
"""


class TestParseManifest:
    def test_parse(self):
        inventory = parse_manifest(MANIFEST)
        first, second = list(inventory)
        assert first.version == "2.0.0"
        assert first.checksum == Checksum.from_hex("cafebabe", algorithm="sha256")
        assert second.os is Os.DARWIN
        assert second.arch is Arch.ARM64
        assert second.checksum.algorithm is None
        assert second.checksum.hex == "deadbeef"
        assert second.metadata == {"channel": "stable"}

    def test_empty_document(self):
        assert len(parse_manifest("")) == 0

    def test_invalid_toml(self):
        with pytest.raises(ManifestFormatError):
            parse_manifest("[[artifacts]\nversion = ")

    def test_artifacts_must_be_a_list(self):
        with pytest.raises(ManifestFormatError):
            parse_manifest('artifacts = "nope"')

    @pytest.mark.parametrize(
        "field, value",
        [("os", "windows"), ("arch", "riscv64"), ("checksum", "xyz"), ("url", "")],
    )
    def test_invalid_entry(self, field: str, value: str):
        text = MANIFEST.replace(
            {
                "os": 'os = "linux"',
                "arch": 'arch = "amd64"',
                "checksum": 'checksum = "sha256:cafebabe"',
                "url": 'url = "https://example.com/tool-2.0.0-linux-amd64.tar.gz"',
            }[field],
            f'{field} = "{value}"',
        )
        with pytest.raises(ManifestFormatError, match="#1"):
            parse_manifest(text)

    def test_missing_field(self):
        text = '[[artifacts]]\nversion = "1"\nos = "linux"\narch = "amd64"\nurl = "u"\n'
        with pytest.raises(ManifestFormatError):
            parse_manifest(text)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_manifest("not = [toml")


class TestSerializeManifest:
    def test_round_trip(self):
        inventory = parse_manifest(MANIFEST)
        assert parse_manifest(serialize_manifest(inventory)) == inventory

    def test_canonical_names_written(self):
        text = serialize_manifest(parse_manifest(MANIFEST))
        assert 'os = "darwin"' in text
        assert 'arch = "arm64"' in text
        assert 'checksum = "deadbeef"' in text
        assert 'checksum = "sha256:cafebabe"' in text

    def test_array_of_tables(self, sample_inventory):
        text = serialize_manifest(sample_inventory)
        assert text.count("[[artifacts]]") == len(sample_inventory)

    def test_empty_metadata_omitted(self, make_artifact):
        text = serialize_manifest(Inventory([make_artifact()]))
        assert "metadata" not in text

    def test_empty_inventory_round_trip(self):
        assert parse_manifest(serialize_manifest(Inventory())) == Inventory()

    def test_metadata_keeps_toml_types(self, make_artifact):
        artifact = make_artifact(
            metadata={"released": datetime.date(2024, 5, 1), "lts": True, "build": 7}
        )
        inventory = Inventory([artifact])
        assert parse_manifest(serialize_manifest(inventory)) == inventory

    def test_order_preserved(self, make_artifact):
        versions = ["3.0.0", "1.0.0", "2.0.0", "1.0.0"]
        inventory = Inventory([make_artifact(v) for v in versions])
        parsed = parse_manifest(serialize_manifest(inventory))
        assert [a.version for a in parsed] == versions


class TestManifestFiles:
    def test_write_then_read(self, sample_inventory, manifest_path: Path):
        write_manifest(manifest_path, sample_inventory)
        assert read_manifest(manifest_path) == sample_inventory

    def test_write_leaves_no_temp_file(self, sample_inventory, manifest_path: Path):
        write_manifest(manifest_path, sample_inventory)
        assert [p.name for p in manifest_path.parent.iterdir()] == [manifest_path.name]

    def test_write_replaces_existing(self, sample_inventory, manifest_path: Path):
        manifest_path.write_text("old content", encoding="utf-8")
        write_manifest(manifest_path, sample_inventory)
        assert read_manifest(manifest_path) == sample_inventory

    def test_read_missing(self, manifest_path: Path):
        with pytest.raises(ManifestReadError) as excinfo:
            read_manifest(manifest_path)
        assert isinstance(excinfo.value, OSError)
        assert isinstance(excinfo.value, ManifestError)

    def test_read_directory(self, tmp_path: Path):
        with pytest.raises(ManifestReadError):
            read_manifest(tmp_path)

    def test_read_malformed(self, manifest_path: Path):
        manifest_path.write_text("[[artifacts]]\nos = 1\n", encoding="utf-8")
        with pytest.raises(ManifestFormatError):
            read_manifest(manifest_path)

    def test_read_non_utf8(self, manifest_path: Path):
        manifest_path.write_bytes(b"\xff\xfe\xfd")
        with pytest.raises(ManifestFormatError):
            read_manifest(manifest_path)

    def test_write_to_missing_directory(self, tmp_path: Path):
        target = tmp_path / "missing" / "inventory.toml"
        with pytest.raises(ManifestWriteError):
            write_manifest(target, Inventory())
        assert not target.parent.exists()


class TestChecksumTable:
    TABLE_ENTRY = """
[[artifacts]]
version = "1.0.0"
os = "linux"
arch = "amd64"
url = "https://example.com/a"
checksum = {{ value = "{value}", algorithm = "SHA256" }}
"""

    def test_table_form_is_hex_decoded(self):
        (artifact,) = parse_manifest(self.TABLE_ENTRY.format(value="DEADBEEF"))
        assert artifact.checksum == Checksum.from_hex("deadbeef", algorithm="sha256")
        assert artifact.checksum.to_text() == "sha256:deadbeef"

    @pytest.mark.parametrize("value", ["zz", "abc", "dead beef"])
    def test_table_form_rejects_invalid_hex(self, value: str):
        with pytest.raises(ManifestFormatError):
            parse_manifest(self.TABLE_ENTRY.format(value=value))

    def test_table_form_written_back_as_text(self):
        inventory = parse_manifest(self.TABLE_ENTRY.format(value="cafe"))
        text = serialize_manifest(inventory)
        assert 'checksum = "sha256:cafe"' in text
        assert parse_manifest(text) == inventory


class TestUnrepresentableMetadata:
    def test_serialize_rejects_none_values(self, make_artifact):
        inventory = Inventory([make_artifact(metadata={"k": None})])
        with pytest.raises(ManifestFormatError):
            serialize_manifest(inventory)

    def test_write_keeps_existing_file(self, make_artifact, manifest_path: Path):
        manifest_path.write_text("artifacts = []\n", encoding="utf-8")
        with pytest.raises(ManifestFormatError):
            write_manifest(manifest_path, Inventory([make_artifact(metadata={"k": None})]))
        assert manifest_path.read_text(encoding="utf-8") == "artifacts = []\n"
        assert [p.name for p in manifest_path.parent.iterdir()] == [manifest_path.name]
