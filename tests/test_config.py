"""Tests for layered configuration loading."""

import pytest

from modgraph.config import (
    ClassifierConfig,
    ModgraphConfig,
    RenderConfig,
    load_config,
    with_overrides,
)
from modgraph.exceptions import ConfigurationError, InvalidConfigError
from modgraph.semantics import DEFAULT_INFRA_KEYWORDS

ENV_VARS = (
    "MODGRAPH_SHOW_EXPORTS",
    "MODGRAPH_SHOW_SERVICES",
    "MODGRAPH_MAX_SERVICE_LENGTH",
    "MODGRAPH_TITLE",
    "MODGRAPH_SHOW_COUNTS",
)


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run each test in an empty directory with no MODGRAPH_* variables."""
    monkeypatch.chdir(tmp_path)
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return tmp_path


class TestRenderConfig:
    """Test render option validation."""

    def test_defaults(self):
        config = RenderConfig()
        assert config.show_exports is True
        assert config.show_services is True
        assert config.max_service_length == 50
        assert config.title == "Module initialization timeline"
        assert config.show_counts is True

    def test_max_service_length_too_small(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            RenderConfig(max_service_length=3)
        assert exc_info.value.key == "max_service_length"

    @pytest.mark.parametrize(
        "key, value",
        [
            ("show_exports", "false"),
            ("show_services", 1),
            ("show_counts", None),
            ("max_service_length", 10.5),
            ("max_service_length", True),
            ("max_service_length", "30"),
            ("title", 7),
        ],
    )
    def test_wrong_type_rejected(self, key, value):
        with pytest.raises(InvalidConfigError) as exc_info:
            RenderConfig(**{key: value})
        assert exc_info.value.key == key

    def test_minimum_accepted(self):
        assert RenderConfig(max_service_length=4).max_service_length == 4

    def test_flowchart_options(self):
        options = RenderConfig(show_exports=False).renderer_options("flowchart")
        assert options == {"show_exports": False, "show_services": True, "max_service_length": 50}

    def test_timeline_options(self):
        options = RenderConfig(title="Boot", show_counts=False).renderer_options("timeline")
        assert options == {"title": "Boot", "show_counts": False}


class TestClassifierConfig:
    """Test keyword vocabulary validation."""

    def test_defaults(self):
        assert ClassifierConfig().infra_keywords == DEFAULT_INFRA_KEYWORDS

    def test_lists_become_tuples(self):
        config = ClassifierConfig(infra_keywords=["db"], domain_keywords=[])
        assert config.infra_keywords == ("db",)
        assert config.domain_keywords == ()

    def test_string_rejected(self):
        with pytest.raises(InvalidConfigError):
            ClassifierConfig(infra_keywords="db")

    def test_non_string_entry_rejected(self):
        with pytest.raises(InvalidConfigError):
            ClassifierConfig(domain_keywords=["order", 3])

    def test_build_classifier(self):
        classifier = ClassifierConfig(infra_keywords=["Widget"], domain_keywords=[]).build_classifier()
        assert classifier.infra_keywords == ("widget",)
        assert classifier.domain_keywords == ()


class TestLoadConfig:
    """Test source merging order."""

    def test_defaults(self):
        assert load_config() == ModgraphConfig()

    def test_project_file(self, isolated):
        (isolated / "modgraph.toml").write_text(
            "[render]\nshow_exports = false\n\n[classifier]\ndomain_keywords = []\n"
        )
        config = load_config()
        assert config.render.show_exports is False
        assert config.classifier.domain_keywords == ()

    def test_explicit_file_beats_project_file(self, isolated):
        (isolated / "modgraph.toml").write_text("[render]\nmax_service_length = 30\n")
        explicit = isolated / "other.toml"
        explicit.write_text("[render]\nmax_service_length = 20\n")
        assert load_config(explicit).render.max_service_length == 20

    def test_env_beats_file(self, isolated, monkeypatch):
        (isolated / "modgraph.toml").write_text("[render]\nmax_service_length = 30\n")
        monkeypatch.setenv("MODGRAPH_MAX_SERVICE_LENGTH", "25")
        assert load_config().render.max_service_length == 25

    def test_override_beats_env(self, monkeypatch):
        monkeypatch.setenv("MODGRAPH_MAX_SERVICE_LENGTH", "25")
        assert load_config(max_service_length=10).render.max_service_length == 10

    def test_none_override_ignored(self, monkeypatch):
        monkeypatch.setenv("MODGRAPH_SHOW_COUNTS", "false")
        assert load_config(show_counts=None).render.show_counts is False

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("1", True), ("yes", True), ("off", False), ("FALSE", False)],
    )
    def test_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("MODGRAPH_SHOW_SERVICES", raw)
        assert load_config().render.show_services is expected

    def test_env_title(self, monkeypatch):
        monkeypatch.setenv("MODGRAPH_TITLE", "Startup")
        assert load_config().render.title == "Startup"

    def test_env_bad_bool(self, monkeypatch):
        monkeypatch.setenv("MODGRAPH_SHOW_EXPORTS", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "MODGRAPH_SHOW_EXPORTS"

    def test_env_bad_int(self, monkeypatch):
        monkeypatch.setenv("MODGRAPH_MAX_SERVICE_LENGTH", "lots")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_missing_explicit_file(self, isolated):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(isolated / "absent.toml")

    def test_invalid_toml(self, isolated):
        path = isolated / "bad.toml"
        path.write_text("[render\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_unknown_section(self, isolated):
        path = isolated / "extra.toml"
        path.write_text("[output]\nformat = 'svg'\n")
        with pytest.raises(ConfigurationError, match="Unknown section"):
            load_config(path)

    def test_unknown_key(self, isolated):
        path = isolated / "extra.toml"
        path.write_text("[render]\ncolour = 'blue'\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_section_must_be_table(self, isolated):
        path = isolated / "flat.toml"
        path.write_text("render = 3\n")
        with pytest.raises(ConfigurationError, match="must be a table"):
            load_config(path)

    def test_string_bool_in_file(self, isolated):
        path = isolated / "typed.toml"
        path.write_text('[render]\nshow_exports = "false"\n')
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "show_exports"
        assert exc_info.value.reason == "must be bool"

    def test_float_length_in_file(self, isolated):
        path = isolated / "typed.toml"
        path.write_text("[render]\nmax_service_length = 10.5\n")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.reason == "must be int"

    def test_invalid_value_in_file(self, isolated):
        path = isolated / "small.toml"
        path.write_text("[render]\nmax_service_length = 1\n")
        with pytest.raises(InvalidConfigError):
            load_config(path)


class TestWithOverrides:
    """Test copying a config with replaced render options."""

    def test_replaces_render_options(self):
        config = with_overrides(ModgraphConfig(), show_exports=False, title=None)
        assert config.render.show_exports is False
        assert config.render.title == "Module initialization timeline"

    def test_original_untouched(self):
        original = ModgraphConfig()
        with_overrides(original, max_service_length=10)
        assert original.render.max_service_length == 50

    def test_validates(self):
        with pytest.raises(InvalidConfigError):
            with_overrides(ModgraphConfig(), max_service_length=0)
