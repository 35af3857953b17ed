"""Test the in-memory configuration object."""

import pytest

from commented_config import CommentedConfig, load_config
from commented_config.document import is_comment_key


@pytest.fixture
def config():
    return CommentedConfig(
        data={
            "_COMMENT_0": " Server settings",
            "server": {"_COMMENT_1": " Address", "host": "localhost", "port": 8080},
            "empty": None,
            "name": "demo",
        },
        comment_count=2,
    )


class TestCommentedConfig:
    """Test value access and comment bookkeeping."""

    @pytest.mark.unit
    def test_is_comment_key(self):
        assert is_comment_key("_COMMENT_12")
        assert not is_comment_key("_COMMENT_")
        assert not is_comment_key("_COMMENT_x")
        assert not is_comment_key(3)

    @pytest.mark.unit
    def test_get(self, config):
        assert config.get("server.port") == 8080
        assert config.get("server") == {"host": "localhost", "port": 8080}
        assert config.get("server.missing", "fallback") == "fallback"
        assert config.get("name.deeper") is None

    @pytest.mark.unit
    def test_set_creates_mappings(self, config):
        config.set("logging.level.root", "INFO")
        assert config.data["logging"] == {"level": {"root": "INFO"}}

        config.set("server.port", 9090)
        assert config.data["server"]["port"] == 9090
        assert config.data["server"]["_COMMENT_1"] == " Address"

    @pytest.mark.unit
    def test_keys_and_to_dict_hide_comments(self, config):
        assert config.keys() == ["server", "empty", "name"]
        assert config.to_dict() == {
            "server": {"host": "localhost", "port": 8080},
            "empty": None,
            "name": "demo",
        }
        assert "_COMMENT_0" in config.data

    @pytest.mark.unit
    def test_add_comment_uses_next_index(self, config):
        assert config.add_comment("Top level") == "_COMMENT_2"
        assert config.add_comment("Nested", key="server") == "_COMMENT_3"

        assert config.comment_count == 4
        assert config.data["_COMMENT_2"] == " Top level"
        assert config.data["server"]["_COMMENT_3"] == " Nested"

    @pytest.mark.unit
    def test_add_comment_to_empty_section(self, config):
        config.add_comment("Nothing here yet", key="empty")
        assert config.data["empty"] == {"_COMMENT_2": " Nothing here yet"}

    @pytest.mark.unit
    def test_add_comment_to_scalar(self, config):
        with pytest.raises(TypeError):
            config.add_comment("No", key="name")

    @pytest.mark.unit
    def test_reload_without_path(self, config):
        with pytest.raises(ValueError):
            config.reload()

    @pytest.mark.integration
    def test_save_and_reload(self, example_file):
        """Test that added comments and values are written and read back."""
        config = load_config(example_file)
        config.add_comment("Retention in days", key="backups")
        config.set("backups.keep", 7)
        config.save()

        text = example_file.read_text()
        assert "  - /var/lib\n\n  # Retention in days\n  keep: 7\n" in text

        config.set("backups.keep", 30)
        config.reload()
        assert config.comment_count == 5
        assert config.get("backups.keep") == 7

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["line one\nline two", "line one\r\nline two", "trailing\r"])
    def test_add_comment_rejects_line_breaks(self, config, text):
        with pytest.raises(ValueError, match="single line"):
            config.add_comment(text)

        assert config.comment_count == 2
        assert "_COMMENT_2" not in config.data

    @pytest.mark.integration
    def test_saved_comments_load_again(self, tmp_path):
        """Test that a file with added comments can be loaded after saving."""
        path = tmp_path / "settings.yml"
        path.write_text("key: 1\n")

        config = load_config(path)
        with pytest.raises(ValueError):
            config.add_comment("line one\nline two")
        config.add_comment("line one")
        config.add_comment("line two")
        config.save()

        assert path.read_text() == "key: 1\n\n# line one\n# line two\n"
        assert load_config(path).comment_count == 2
