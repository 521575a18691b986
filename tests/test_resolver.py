# SPDX-License-Identifier: MIT
"""Tests for initial language resolution."""

from pagelang.document import is_hidden
from pagelang.engine import LocalizationEngine
from pagelang.resolver import (
    Environment,
    environment_language,
    request_language,
    resolve_initial,
)
from pagelang.store import MemoryStore, NullStore


class TestResolveInitial:
    def test_request_parameter_wins(self, config):
        env = Environment(location="https://example.org/?lang=es", language="de")
        assert resolve_initial(env, MemoryStore({"lang": "fr"}), config) == "es"

    def test_persisted_choice_without_parameter(self, config):
        env = Environment(location="https://example.org/", language="de")
        assert resolve_initial(env, MemoryStore({"lang": "fr"}), config) == "fr"

    def test_environment_language_truncated(self, config):
        env = Environment(location="https://example.org/", language="de-DE")
        assert resolve_initial(env, NullStore(), config) == "de"

    def test_posix_locale_value(self, config):
        env = Environment(language="pt_BR.UTF-8")
        assert resolve_initial(env, NullStore(), config) == "pt"

    def test_default_when_nothing_else(self, config):
        assert resolve_initial(Environment(), NullStore(), config) == "ca"

    def test_does_not_write_store(self, config):
        store = MemoryStore()
        resolve_initial(Environment(language="de"), store, config)
        assert store.get("lang") is None


class TestRequestLanguage:
    def test_among_other_params(self):
        assert request_language("/page?a=1&lang=es#top", "lang") == "es"

    def test_custom_param_name(self):
        assert request_language("/page?hl=it", "hl") == "it"

    def test_rejects_non_codes(self):
        assert request_language("/page?lang=eng", "lang") is None
        assert request_language("/page?lang=ES", "lang") is None
        assert request_language("/page?lang=", "lang") is None

    def test_no_location(self):
        assert request_language(None, "lang") is None


class TestEnvironmentLanguage:
    def test_first_usable_variable(self):
        environ = {"LC_ALL": "C", "LANG": "ja_JP.UTF-8"}
        assert environment_language(["LC_ALL", "LANG"], environ) == "ja_JP.UTF-8"

    def test_none_usable(self):
        assert environment_language(["LANG"], {"LANG": "POSIX"}) is None
        assert environment_language(["LANG"], {}) is None


def test_malformed_persisted_value_skipped(config):
    env = Environment(language="de")
    assert resolve_initial(env, MemoryStore({"lang": "english"}), config) == "de"


class TestUnusableEnvironmentLanguage:
    def test_c_utf8_locale_falls_back_to_default(self, config):
        language = environment_language(["LANG"], {"LANG": "C.UTF-8"})
        assert resolve_initial(Environment(language=language), NullStore(), config) == "ca"

    def test_one_letter_value_falls_back_to_default(self, config):
        assert resolve_initial(Environment(language="d"), NullStore(), config) == "ca"

    def test_default_language_elements_shown(self, make_root, config, bilingual_page):
        root = make_root(bilingual_page + '<div id="local" autolang="ca">Català</div>')
        engine = LocalizationEngine(root, config)
        assert engine.start(Environment(language="C.UTF-8")) == "ca"
        assert not is_hidden(root.get_element_by_id("local"))
