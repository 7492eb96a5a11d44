import pytest

from nettag.config.core.registry import SettingRegistry
from nettag.config.core.setting import build_boolean_setting, build_path_fragment_setting
from nettag.config.settings import SETTING_REGISTRY, SETTING_TABLE
from nettag.core.exceptions import NotFoundError, ShapeMismatchError, UnknownSettingKeyError

pytestmark = pytest.mark.unit


class TestSettingRegistry:

    def setup_method(self):
        self.table = {
            "b": build_boolean_setting("B"),
            "a": build_path_fragment_setting("A", False, False),
        }
        self.registry = SettingRegistry(self.table)

    def test_keys_keep_table_order(self):
        assert self.registry.get_keys() == ["b", "a"]
        assert list(self.registry) == ["b", "a"]
        assert len(self.registry) == 2

    def test_has_key(self):
        assert self.registry.has_key("a")
        assert "a" in self.registry
        assert not self.registry.has_key("c")
        assert not self.registry.has_key(None)
        assert not self.registry.has_key(["a"])

    def test_get_setting_tags_key(self):
        setting = self.registry.get_setting("b")
        assert setting.env_var == "B"
        assert setting.key == "b"
        with pytest.raises(ShapeMismatchError) as excinfo:
            setting.cast("yes")
        assert excinfo.value.key == "b"

    def test_unknown_key_raises(self):
        with pytest.raises(UnknownSettingKeyError) as excinfo:
            self.registry.get_setting("missing")
        assert isinstance(excinfo.value, NotFoundError)
        assert excinfo.value.key == "missing"
        assert "missing" in str(excinfo.value)

    def test_table_is_read_only(self):
        table = self.registry.get_table()
        with pytest.raises(TypeError):
            table["c"] = build_boolean_setting("C")
        assert not self.registry.has_key("c")

    def test_source_table_changes_do_not_leak(self):
        self.table["c"] = build_boolean_setting("C")
        assert not self.registry.has_key("c")


class TestServerSettings:

    def test_registered_keys(self):
        assert SETTING_REGISTRY.get_keys() == [
            "trackedExtensions", "trackedFilenames", "trackedDirectories", "enableThumbnailCache"
        ]
        assert list(SETTING_TABLE) == SETTING_REGISTRY.get_keys()

    @pytest.mark.parametrize("key,env_var", [
        ("trackedExtensions", "TRACKED_EXTENSIONS"),
        ("trackedFilenames", "TRACKED_FILENAMES"),
        ("trackedDirectories", "TRACKED_DIRECTORIES"),
        ("enableThumbnailCache", "ENABLE_THUMBNAIL_CACHE"),
    ])
    def test_environment_variables(self, key, env_var):
        assert SETTING_REGISTRY.get_setting(key).env_var == env_var

    def test_extensions_allow_empty_fragment(self):
        value = {"whitelist": True, "pathFragments": [
            {"data": "", "caseSensitive": False, "interchangeableSlashes": True}
        ]}
        assert SETTING_REGISTRY.get_setting("trackedExtensions").validate(value)
        assert not SETTING_REGISTRY.get_setting("trackedFilenames").validate(value)
        assert not SETTING_REGISTRY.get_setting("trackedDirectories").validate(value)

    def test_only_directories_allow_nesting(self, directory_whitelist):
        assert SETTING_REGISTRY.get_setting("trackedDirectories").validate(directory_whitelist)
        assert not SETTING_REGISTRY.get_setting("trackedFilenames").validate(directory_whitelist)

    def test_thumbnail_cache_is_boolean(self):
        setting = SETTING_REGISTRY.get_setting("enableThumbnailCache")
        assert setting.validate(True)
        assert not setting.validate("true")
