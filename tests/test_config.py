import pathlib
import re

import pytest

from i18n_lib import (
    ConfigError,
    I18nConfig,
    InvalidConfigType,
    InvalidDefaultLanguage,
    InvalidDirectoryPath,
    InvalidLanguages,
    MissingConfig,
    MissingRequiredFields,
    State,
    Translator,
)

I18N_DIR = pathlib.Path(__file__).resolve().parent / "i18n"


@pytest.mark.parametrize("config", [None, "", 0, []])
def test_missing_config(config):
    with pytest.raises(MissingConfig):
        Translator().configure(config)


@pytest.mark.parametrize("config", ["22", 22, ["en"], True])
def test_config_must_be_a_mapping(config):
    with pytest.raises(InvalidConfigType, match="Invalid config"):
        Translator().configure(config)


def test_invalid_config_type_is_also_a_type_error():
    with pytest.raises(TypeError):
        Translator().configure(22)


@pytest.mark.parametrize(
    "config",
    [{}, {"path": ""}, {"languages": ["en"]}, {"directoryPath": str(I18N_DIR)}],
)
def test_missing_required_fields(config):
    with pytest.raises(MissingRequiredFields):
        Translator().configure(config)


def test_path_required():
    with pytest.raises(InvalidDirectoryPath, match="is required"):
        Translator().configure({"path": None, "languages": ["en"]})
    with pytest.raises(InvalidDirectoryPath, match="is required"):
        Translator().configure({"directoryPath": "", "languages": ["en"]})


def test_path_must_be_a_directory():
    file_path = I18N_DIR / "en.json"
    expected = re.escape(f'"{file_path}" is not a directory.')
    with pytest.raises(InvalidDirectoryPath, match=expected):
        Translator().configure({"path": str(file_path), "languages": ["en"]})


def test_path_must_exist():
    with pytest.raises(InvalidDirectoryPath, match="does not exist"):
        Translator().configure({"path": str(I18N_DIR / "invalid"), "languages": ["en"]})


def test_path_wrong_type():
    with pytest.raises(InvalidDirectoryPath):
        Translator().configure({"path": 12, "languages": ["en"]})


def test_languages_required():
    with pytest.raises(InvalidLanguages, match='"languages" is required'):
        Translator().configure({"path": str(I18N_DIR), "languages": None})


@pytest.mark.parametrize("languages", [2, "en", {"en": 1}])
def test_languages_must_be_a_list(languages):
    with pytest.raises(InvalidLanguages, match="must be a list"):
        Translator().configure({"path": str(I18N_DIR), "languages": languages})


def test_languages_not_empty():
    with pytest.raises(InvalidLanguages, match="at least one language"):
        Translator().configure({"path": str(I18N_DIR), "languages": []})


@pytest.mark.parametrize("languages", [["en", 2], ["en", None], ["en", ""]])
def test_languages_must_be_strings(languages):
    with pytest.raises(InvalidLanguages):
        Translator().configure({"path": str(I18N_DIR), "languages": languages})


def test_languages_tuple_accepted():
    config = Translator().configure({"path": str(I18N_DIR), "languages": ("en", "fr")})
    assert config.languages == ["en", "fr"]


def test_default_language_must_be_a_string():
    with pytest.raises(InvalidDefaultLanguage, match="must be a string"):
        Translator().configure(
            {"path": str(I18N_DIR), "languages": ["en", "fr"], "defaultLanguage": 2}
        )


def test_default_language_must_be_configured():
    expected = re.escape('The "defaultLanguage" must take one of the following values : "en", "fr".')
    with pytest.raises(InvalidDefaultLanguage, match=expected):
        Translator().configure(
            {"path": str(I18N_DIR), "languages": ["en", "fr"], "defaultLanguage": "es"}
        )


def test_checks_run_in_order():
    # bad directory is reported before bad languages and default language
    with pytest.raises(InvalidDirectoryPath):
        Translator().configure({"path": "", "languages": [], "defaultLanguage": 3})
    with pytest.raises(InvalidLanguages):
        Translator().configure({"path": str(I18N_DIR), "languages": 2, "defaultLanguage": 3})


def test_all_config_errors_share_a_base():
    with pytest.raises(ConfigError):
        Translator().configure({"path": str(I18N_DIR), "languages": []})
    with pytest.raises(ValueError):
        Translator().configure({"path": str(I18N_DIR), "languages": []})


def test_successful_configure():
    tr = Translator()
    assert tr.state is State.UNCONFIGURED
    config = tr.configure({"directoryPath": str(I18N_DIR), "languages": ["en", "fr"]})
    assert tr.state is State.CONFIGURED
    assert isinstance(config, I18nConfig)
    assert config.directory_path == I18N_DIR
    assert config.default_language is None
    assert tr.languages == ["en", "fr"]


def test_configure_accepts_keywords_and_snake_case():
    tr = Translator()
    tr.configure(directory_path=I18N_DIR, languages=["en", "fr"], default_language="fr")
    assert tr.default_language == "fr"

    tr = Translator({"directory_path": str(I18N_DIR), "languages": ["fr"]})
    assert tr.state is State.CONFIGURED


def test_configure_accepts_model():
    model = I18nConfig(directory_path=I18N_DIR, languages=["en"])
    tr = Translator(model)
    assert tr.config == model


def test_failed_configure_keeps_previous_config():
    tr = Translator({"path": str(I18N_DIR), "languages": ["en", "fr"]})
    tr.load()
    with pytest.raises(InvalidLanguages):
        tr.configure({"path": str(I18N_DIR), "languages": []})
    assert tr.state is State.READY
    assert tr.t("username", "fr") == "Nom d'utilisateur"


def test_reconfigure_requires_new_load():
    tr = Translator({"path": str(I18N_DIR), "languages": ["en", "fr"]})
    tr.load()
    tr.configure({"path": str(I18N_DIR), "languages": ["fr"]})
    assert tr.state is State.CONFIGURED
    assert not tr.is_loaded


def test_keywords_merge_over_mapping():
    tr = Translator()
    config = tr.configure({"path": str(I18N_DIR), "languages": ["en", "fr"]}, defaultLanguage="fr")
    assert config.default_language == "fr"
    assert tr.default_language == "fr"


def test_keyword_replaces_every_alias_of_its_field(tmp_path):
    config = Translator().configure(
        {"directoryPath": str(I18N_DIR), "languages": ["en"]}, path=str(tmp_path)
    )
    assert config.directory_path == tmp_path


def test_keywords_merge_over_model():
    model = I18nConfig(directory_path=I18N_DIR, languages=["en", "fr"])
    config = Translator().configure(model, default_language="fr")
    assert config.default_language == "fr"
    assert config.languages == ["en", "fr"]


def test_keywords_do_not_rescue_a_non_mapping():
    with pytest.raises(InvalidConfigType):
        Translator().configure("22", languages=["en"])
