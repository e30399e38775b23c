import pytest

from autoload_exclude.config import (
    EXCLUDE_CLASSMAP_PROPERTY,
    EXCLUDE_FILES_PROPERTY,
    EXCLUDE_PATHS_PROPERTY,
    EXCLUDE_PSR4_PROPERTY,
    PLUGIN_SETTINGS_PROPERTY,
    ExclusionConfig,
    get_paths_to_exclude,
)


def test_property_names():
    assert PLUGIN_SETTINGS_PROPERTY == "autoload-exclude"
    assert EXCLUDE_FILES_PROPERTY == "exclude-from-files"
    assert EXCLUDE_PSR4_PROPERTY == "exclude-from-psr4"
    assert EXCLUDE_CLASSMAP_PROPERTY == "exclude-from-classmap"
    assert EXCLUDE_PATHS_PROPERTY == "paths-to-exclude-from-autoload"


def test_from_extra_reads_all_three_lists():
    config = ExclusionConfig.from_extra(
        {
            "autoload-exclude": {
                "exclude-from-files": ["acme/lib/helpers.php", "acme/debug/*"],
                "exclude-from-psr4": ["Acme\\Legacy\\*"],
                "exclude-from-classmap": ["acme/lib/classes"],
            }
        }
    )
    assert config.files == ("acme/lib/helpers.php", "acme/debug/*")
    assert config.psr4 == ("Acme\\Legacy\\*",)
    assert config.classmap == ("acme/lib/classes",)
    assert not config.is_empty()


@pytest.mark.parametrize(
    "extra",
    [
        None,
        {},
        {"other-plugin": {"exclude-from-files": ["a.php"]}},
        {"autoload-exclude": None},
        {"autoload-exclude": "exclude-from-files"},
        {"autoload-exclude": ["exclude-from-files"]},
        {"autoload-exclude": {}},
        "not a mapping",
    ],
)
def test_from_extra_missing_or_malformed_settings(extra):
    config = ExclusionConfig.from_extra(extra)
    assert config == ExclusionConfig()
    assert config.is_empty()


def test_from_extra_wrong_value_types_fall_back_per_list():
    config = ExclusionConfig.from_extra(
        {
            "autoload-exclude": {
                "exclude-from-files": "acme/lib/helpers.php",
                "exclude-from-psr4": {"Acme\\": True},
                "exclude-from-classmap": ["acme/lib/classes"],
            }
        }
    )
    assert config.files == ()
    assert config.psr4 == ()
    assert config.classmap == ("acme/lib/classes",)


def test_from_extra_drops_non_string_items():
    config = ExclusionConfig.from_extra({"autoload-exclude": {"exclude-from-files": ["a.php", 3, None, "b.php"]}})
    assert config.files == ("a.php", "b.php")


@pytest.mark.parametrize("field", ["files", "psr4", "classmap"])
def test_is_empty_checks_every_list(field):
    assert not ExclusionConfig(**{field: ("x",)}).is_empty()


def test_config_is_frozen():
    config = ExclusionConfig()
    with pytest.raises(AttributeError):
        config.files = ("a.php",)  # type: ignore[misc]


def test_get_paths_to_exclude():
    assert get_paths_to_exclude({"paths-to-exclude-from-autoload": ["acme/sandbox", "other/*"]}) == (
        "acme/sandbox",
        "other/*",
    )


@pytest.mark.parametrize(
    "extra",
    [None, {}, {"paths-to-exclude-from-autoload": "acme/sandbox"}, {"paths-to-exclude-from-autoload": None}],
)
def test_get_paths_to_exclude_missing_or_malformed(extra):
    assert get_paths_to_exclude(extra) == ()
