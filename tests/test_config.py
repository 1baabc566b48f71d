"""Tests for reading repomap settings."""

from repomap.config import DEFAULT_IGNORE_DIRS, Settings, load_settings


class TestLoadSettings:
    def test_defaults(self, tmp_path):
        settings = load_settings(tmp_path)

        assert settings == Settings()
        assert settings.ignore_dirs == DEFAULT_IGNORE_DIRS

    def test_repomap_toml(self, make_project):
        root = make_project(
            {
                ".repomap.toml": '[repomap]\nexclude = ["build", "vendor"]\nrespect_gitignore = false\n'
            }
        )

        settings = load_settings(root)

        assert settings.exclude == {"build", "vendor"}
        assert settings.respect_gitignore is False
        assert settings.ignore_dirs == {"node_modules", ".git", "build", "vendor"}

    def test_pyproject_tool_table(self, make_project):
        root = make_project({"pyproject.toml": '[tool.repomap]\nexclude = ["dist"]\n'})

        assert load_settings(root).exclude == {"dist"}

    def test_repomap_toml_wins(self, make_project):
        root = make_project(
            {
                ".repomap.toml": '[repomap]\nexclude = ["a"]\n',
                "pyproject.toml": '[tool.repomap]\nexclude = ["b"]\n',
            }
        )

        assert load_settings(root).exclude == {"a"}

    def test_malformed_toml_falls_back(self, make_project):
        root = make_project(
            {
                ".repomap.toml": "[repomap\nexclude = ",
                "pyproject.toml": '[tool.repomap]\nexclude = ["b"]\n',
            }
        )

        assert load_settings(root).exclude == {"b"}

    def test_invalid_values_are_ignored(self, make_project, caplog):
        root = make_project(
            {".repomap.toml": '[repomap]\nexclude = "build"\nrespect_gitignore = "no"\n'}
        )

        with caplog.at_level("WARNING", logger="repomap"):
            settings = load_settings(root)

        assert settings == Settings()
        assert "exclude" in caplog.text
        assert "respect_gitignore" in caplog.text

    def test_pyproject_without_table(self, make_project):
        root = make_project({"pyproject.toml": '[project]\nname = "x"\n'})

        assert load_settings(root) == Settings()
