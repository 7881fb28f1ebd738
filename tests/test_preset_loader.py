"""Tests for stack presets."""
import pytest

from monolith.core.preset_loader import (
    DEFAULT_BUILD_COMMAND,
    DEFAULT_HEALTH_PATH,
    DEFAULT_PORT,
    DEFAULT_RUNTIME_VERSION,
    PresetLoader,
)


class TestPresetLoader:
    """Test PresetLoader functionality."""

    @pytest.fixture
    def loader(self):
        return PresetLoader()

    def test_list_presets(self, loader):
        presets = loader.list_presets()

        assert [p.slug for p in presets] == ["java", "node", "python"]
        for preset in presets:
            assert preset.name
            assert preset.install_command
            assert preset.test_command
            assert preset.file_path.exists()

    def test_node_preset(self, loader):
        preset = loader.load_preset("node")

        assert preset.default_port == 3000
        assert preset.runtime_version == "20"
        assert preset.install_command == "npm ci"
        assert preset.health_path == "/health"

    def test_java_preset(self, loader):
        preset = loader.load_preset("java")

        assert preset.default_port == 8080
        assert preset.health_path == "/actuator/health"
        assert "mvnw" in preset.build_command

    def test_python_preset_uses_default_build_command(self, loader):
        preset = loader.load_preset("python")

        assert preset.default_port == 8000
        assert preset.build_command == DEFAULT_BUILD_COMMAND

    def test_unknown_stack(self, loader):
        with pytest.raises(FileNotFoundError):
            loader.load_preset("cobol")

    def test_missing_values_fall_back_to_defaults(self, tmp_path):
        (tmp_path / "go.yml").write_text("name: Go\ninstall_command: go mod download\n")

        preset = PresetLoader(tmp_path).load_preset("go")

        assert preset.name == "Go"
        assert preset.default_port == DEFAULT_PORT
        assert preset.runtime_version == DEFAULT_RUNTIME_VERSION
        assert preset.build_command == DEFAULT_BUILD_COMMAND
        assert preset.health_path == DEFAULT_HEALTH_PATH

    def test_non_mapping_preset_is_invalid(self, tmp_path):
        (tmp_path / "bad.yml").write_text("- just\n- a list\n")

        with pytest.raises(ValueError):
            PresetLoader(tmp_path).load_preset("bad")

    def test_listing_skips_broken_presets(self, tmp_path):
        (tmp_path / "bad.yml").write_text("- just a list\n")
        (tmp_path / "good.yml").write_text("name: Good\n")

        presets = PresetLoader(tmp_path).list_presets()

        assert [p.slug for p in presets] == ["good"]

    def test_missing_directory_lists_nothing(self, tmp_path):
        assert PresetLoader(tmp_path / "nope").list_presets() == []
