import pytest
from pathlib import Path
from viewrender.config import TemplatesConfig, ApplicationConfig, is_numeric, as_path_list


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, True),
        (3, True),
        (1.5, True),
        ("0", True),
        ("12", True),
        ("-1.5e3", True),
        (" 7 ", True),
        ("app", False),
        ("1a", False),
        ("", False),
        (None, False),
        (True, True),
        (False, True),
    ],
)
def test_is_numeric(value, expected) -> None:
    assert is_numeric(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, []),
        ("views/", ["views/"]),
        (Path("views"), ["views"]),
        (["a", "b"], ["a", "b"]),
        (("a",), ["a"]),
        ({"x": "a", "y": "b"}, ["a", "b"]),
    ],
)
def test_as_path_list(value, expected) -> None:
    assert as_path_list(value) == expected


class TestTemplatesConfig:
    def test_defaults(self):
        config = TemplatesConfig()
        assert config.layout is None
        assert config.map == {}
        assert config.paths == {}

    def test_numeric_keys_go_to_default_namespace(self):
        config = TemplatesConfig.model_validate({"paths": {"app": "views/", 0: "shared/", "1": ["more/"]}})
        assert config.paths == {"app": ["views/"], None: ["shared/", "more/"]}

    def test_bool_keys_go_to_default_namespace(self):
        config = TemplatesConfig.model_validate({"paths": {True: "on/", "app": "views/"}})
        assert config.paths == {None: ["on/"], "app": ["views/"]}

    def test_scalar_and_list_paths_are_equal(self):
        scalar = TemplatesConfig.model_validate({"paths": {"app": "views/"}})
        listed = TemplatesConfig.model_validate({"paths": {"app": ["views/"]}})
        assert scalar.paths == listed.paths

    def test_none_paths_value_is_empty(self):
        config = TemplatesConfig.model_validate({"paths": {"app": None}})
        assert config.paths == {"app": []}

    def test_malformed_map_and_paths_are_ignored(self, caplog):
        config = TemplatesConfig.model_validate({"map": ["home.html"], "paths": "views/"})
        assert config.map == {}
        assert config.paths == {}
        assert "Template map should be a mapping" in caplog.text
        assert "Template paths should be a mapping" in caplog.text

    def test_null_sections(self):
        config = TemplatesConfig.model_validate({"layout": None, "map": None, "paths": None})
        assert config == TemplatesConfig()

    def test_non_string_layout_is_converted(self):
        assert TemplatesConfig.model_validate({"layout": 5}).layout == "5"

    def test_normalization_is_idempotent(self):
        config = TemplatesConfig.model_validate({"paths": {0: "shared/", "app": "views/"}})
        assert TemplatesConfig.model_validate(config.model_dump()) == config


class TestFromConfig:
    def test_mapping(self):
        config = TemplatesConfig.from_config({"templates": {"layout": "layout/default"}})
        assert config.layout == "layout/default"

    @pytest.mark.parametrize("raw", [{}, {"other": 1}, {"templates": None}, {"templates": "x"}, None, []])
    def test_missing_or_malformed_section(self, raw):
        assert TemplatesConfig.from_config(raw) == TemplatesConfig()

    def test_application_config(self):
        app = ApplicationConfig.model_validate({"templates": {"map": {"home": "home.html"}}, "debug": True})
        assert TemplatesConfig.from_config(app).map == {"home": "home.html"}
        assert app.model_extra == {"debug": True}
