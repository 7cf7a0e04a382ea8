"""Unit tests for the Paths registry."""

import pytest

from approot.handlers.error_handler import InvalidPathError
from approot.models.paths import PathsResponse
from approot.services.registry_service.paths import DEFAULT_LAYOUT, Paths

ROOT = "/var/www/app"


class TestDefaults:
    def setup_method(self):
        self.paths = Paths(ROOT, {}, False, False)

    def test_root(self):
        assert self.paths.get_root_path() == ROOT

    @pytest.mark.parametrize(
        "getter, expected",
        [
            ("get_config_path", "/var/www/app/config"),
            ("get_resources_path", "/var/www/app/resources"),
            ("get_views_path", "/var/www/app/resources/views"),
            ("get_assets_path", "/var/www/app/resources/assets"),
            ("get_cache_path", "/var/www/app/var/cache"),
            ("get_logs_path", "/var/www/app/var/logs"),
            ("get_public_path", "/var/www/app/public"),
            ("get_database_path", "/var/www/app/database"),
            ("get_migrations_path", "/var/www/app/database/migrations"),
            ("get_storage_path", "/var/www/app/storage"),
            ("get_tests_path", "/var/www/app/tests"),
        ],
    )
    def test_accessors(self, getter, expected):
        assert getattr(self.paths, getter)() == expected

    def test_get_paths_contains_every_category(self):
        all_paths = self.paths.get_paths()

        assert list(all_paths) == list(DEFAULT_LAYOUT)
        assert all_paths["root"] == ROOT
        assert all_paths["config"] == ROOT + "/config"
        assert self.paths.get_all_paths() == all_paths

    def test_get_paths_returns_a_copy(self):
        self.paths.get_paths()["config"] = "/elsewhere"
        assert self.paths.get_config_path() == ROOT + "/config"


class TestNormalization:
    def test_trailing_slash_on_root(self):
        paths = Paths("/var/www/app/", auto_discover=False)
        assert paths.get_root_path() == ROOT
        assert paths.get_config_path() == ROOT + "/config"

    def test_windows_root(self):
        paths = Paths("C:\\www\\app\\", auto_discover=False)
        assert paths.get_root_path() == "C:/www/app"
        assert paths.get_views_path() == "C:/www/app/resources/views"

    def test_overrides_are_normalized(self):
        paths = Paths(ROOT, {"cache": "D:\\cache\\"}, auto_discover=False)
        assert paths.get_cache_path() == "D:/cache"

    def test_every_value_is_normalized(self):
        paths = Paths(ROOT + "\\", {"extra": "/srv/extra//"}, auto_discover=False)
        for value in paths.get_paths().values():
            assert "\\" not in value
            assert not value.endswith("/")


class TestOverrides:
    def test_custom_paths(self):
        paths = Paths(
            ROOT,
            {"config": ROOT + "/custom/config", "views": ROOT + "/custom/views"},
            False,
            False,
        )

        assert paths.get_root_path() == ROOT
        assert paths.get_config_path() == ROOT + "/custom/config"
        assert paths.get_views_path() == ROOT + "/custom/views"

    def test_custom_category(self):
        paths = Paths(ROOT, {"uploads": "/srv/uploads"}, auto_discover=False)

        assert paths.get_paths()["uploads"] == "/srv/uploads"
        assert paths.get("uploads") == "/srv/uploads"
        assert paths.get("missing") is None
        assert paths.get("missing", "fallback") == "fallback"

    def test_override_beats_discovery_and_default(self, tmp_path):
        (tmp_path / "etc").mkdir()
        root = str(tmp_path)

        discovered = Paths(root)
        overridden = Paths(root, {"config": "/opt/config"})

        assert discovered.get_config_path() == root + "/etc"
        assert overridden.get_config_path() == "/opt/config"


class TestAutoDiscovery:
    def test_discovered_directories_replace_defaults(self, tmp_path):
        for name in ("config", "templates", "public"):
            (tmp_path / name).mkdir()
        root = str(tmp_path)

        paths = Paths(root, {}, True, False)

        assert paths.get_config_path() == root + "/config"
        assert paths.get_views_path() == root + "/templates"
        assert paths.get_public_path() == root + "/public"
        # Nothing found for cache, default stays
        assert paths.get_cache_path() == root + "/var/cache"

    def test_discovery_disabled(self, tmp_path):
        (tmp_path / "templates").mkdir()
        paths = Paths(str(tmp_path), auto_discover=False)
        assert paths.get_views_path() == str(tmp_path) + "/resources/views"


class TestValidation:
    def test_missing_directories_fail(self, tmp_path):
        with pytest.raises(InvalidPathError) as exc_info:
            Paths(str(tmp_path), {}, False, True)

        # root exists, config is the first default that does not
        assert exc_info.value.category == "config"

    def test_complete_layout_passes(self, tmp_path):
        for suffix in DEFAULT_LAYOUT.values():
            if suffix:
                (tmp_path / suffix.lstrip("/")).mkdir(parents=True, exist_ok=True)

        paths = Paths(str(tmp_path), {}, False, True)

        assert paths.get_migrations_path() == str(tmp_path) + "/database/migrations"

    def test_invalid_override_fails(self, tmp_path):
        for suffix in DEFAULT_LAYOUT.values():
            if suffix:
                (tmp_path / suffix.lstrip("/")).mkdir(parents=True, exist_ok=True)

        with pytest.raises(InvalidPathError) as exc_info:
            Paths(str(tmp_path), {"uploads": str(tmp_path / "uploads")}, False, True)

        assert exc_info.value.category == "uploads"


class TestJoin:
    def setup_method(self):
        self.paths = Paths(ROOT, auto_discover=False)

    def test_relative_and_leading_slash_agree(self):
        assert self.paths.path("config/app.php") == ROOT + "/config/app.php"
        assert self.paths.path("/config/app.php") == ROOT + "/config/app.php"

    def test_backslashes_and_trailing_slash(self):
        assert self.paths.path("\\storage\\uploads\\") == ROOT + "/storage/uploads"

    def test_empty_relative(self):
        assert self.paths.path("") == ROOT + "/"


class TestBuildPaths:
    def test_build_path(self):
        paths = Paths(ROOT, auto_discover=False)
        assert paths.get_build_path() == ROOT + "/public/build"
        assert paths.get_build_path("dist") == ROOT + "/public/dist"

    def test_build_assets_path_ignores_directory(self):
        paths = Paths(ROOT, auto_discover=False)
        assert paths.get_build_assets_path() == ROOT + "/public/assets"
        assert paths.get_build_assets_path("dist") == ROOT + "/public/assets"

    def test_manifest_defaults_to_vite_location(self, tmp_path):
        paths = Paths(str(tmp_path), auto_discover=False)
        assert paths.get_vite_manifest_path() == (
            str(tmp_path) + "/public/assets/.vite/manifest.json"
        )

    def test_manifest_in_assets_directory(self, tmp_path):
        assets = tmp_path / "public" / "assets"
        (assets / ".vite").mkdir(parents=True)
        (assets / "manifest.json").write_text("{}")
        (assets / ".vite" / "manifest.json").write_text("{}")

        paths = Paths(str(tmp_path), auto_discover=False)

        assert paths.get_vite_manifest_path() == str(tmp_path) + "/public/assets/manifest.json"

    def test_manifest_in_vite_directory(self, tmp_path):
        vite = tmp_path / "public" / "assets" / ".vite"
        vite.mkdir(parents=True)
        (vite / "manifest.json").write_text("{}")

        paths = Paths(str(tmp_path), auto_discover=False)

        assert paths.get_vite_manifest_path("ignored") == (
            str(tmp_path) + "/public/assets/.vite/manifest.json"
        )


class TestExport:
    def test_to_model_keeps_custom_categories(self):
        paths = Paths(ROOT, {"uploads": "/srv/uploads"}, auto_discover=False)

        model = paths.to_model()

        assert isinstance(model, PathsResponse)
        dumped = model.model_dump()
        assert dumped["config"] == ROOT + "/config"
        assert dumped["uploads"] == "/srv/uploads"
