"""Unit tests for directive-driven exclusion rules."""

import os
import tempfile

import pytest

from pathdirectives.directive import Config, Directive
from pathdirectives.exceptions import ParseError
from pathdirectives.selection_rules.base_rules import BaseExclusionRules
from pathdirectives.selection_rules.directive_rules import (
    DirectiveExclusionRules,
    path_to_pattern,
    strip_current_dir,
)


@pytest.fixture
def temp_config_file():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("include /home/user\n")
        f.write("exclude /home/user/.local, /home/user/.cache\n")
    yield f.name
    os.unlink(f.name)


@pytest.fixture
def temp_extra_config_file():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("include /etc/passwd\n")
    yield f.name
    os.unlink(f.name)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/home/user", False),
        ("/home/user/docs/report.txt", False),
        ("/home/user/.local", True),
        ("/home/user/.local/share/app", True),
        ("/home/user/.cache/pip", True),
        # Component-wise matching, not string prefixes
        ("/home/user/.localrc", False),
        ("/home/username", True),
        # Outside every include
        ("/etc/passwd", True),
        ("/var/log/syslog", True),
    ],
)
def test_exclude_with_includes_and_excludes(temp_config_file, path, expected):
    rules = DirectiveExclusionRules(rules_files=temp_config_file)
    assert rules.exclude(path) == expected


class TestDirectiveExclusionRules:
    """Test construction and rule addition."""

    def test_is_exclusion_rules(self):
        """Test that the adapter implements the exclusion rule interface."""
        assert isinstance(DirectiveExclusionRules(), BaseExclusionRules)

    def test_empty_rules_exclude_nothing(self):
        """Test that no directives means nothing is excluded."""
        rules = DirectiveExclusionRules()
        assert not rules.has_rules()
        assert not rules.exclude("/anything")

    def test_excludes_only(self):
        """Test that without includes everything but the excludes is kept."""
        rules = DirectiveExclusionRules(Config(excludes=["/tmp"]))
        assert rules.has_rules()
        assert rules.exclude("/tmp/file")
        assert not rules.exclude("/srv/file")

    def test_exclude_wins_over_include(self):
        """Test that an excluded path stays excluded even if also included."""
        rules = DirectiveExclusionRules(Config(includes=["/srv", "/srv/tmp"], excludes=["/srv/tmp"]))
        assert rules.exclude("/srv/tmp/x")
        assert not rules.exclude("/srv/www")

    def test_add_directive(self):
        """Test adding a parsed directive."""
        rules = DirectiveExclusionRules()
        rules.add_directive(Directive.include("/data", "/opt/app"))
        assert not rules.exclude("/opt/app/bin")
        assert rules.exclude("/opt/other")

    def test_add_rule_parses_line(self):
        """Test that add_rule accepts a directive line."""
        rules = DirectiveExclusionRules()
        rules.add_rule("exclude /var/cache , /var/tmp")
        assert rules.exclude("/var/cache/apt")
        assert rules.exclude("/var/tmp")
        assert not rules.exclude("/var/lib")

    def test_add_rule_invalid_line(self):
        """Test that a malformed rule raises ParseError."""
        rules = DirectiveExclusionRules()
        with pytest.raises(ParseError):
            rules.add_rule("ignore /var/cache")

    def test_load_multiple_files(self, temp_config_file, temp_extra_config_file):
        """Test that rules from several files are combined."""
        rules = DirectiveExclusionRules(rules_files=[temp_config_file, temp_extra_config_file])
        assert not rules.exclude("/etc/passwd")
        assert not rules.exclude("/home/user/docs")
        assert rules.exclude("/etc/shadow")

    def test_load_rules_after_init(self, temp_config_file):
        """Test loading a file into existing rules."""
        rules = DirectiveExclusionRules(Config(includes=["/srv"]))
        rules.load_rules(temp_config_file)
        assert not rules.exclude("/srv/www")
        assert rules.exclude("/home/user/.cache")

    def test_load_missing_file(self):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            DirectiveExclusionRules(rules_files="/nonexistent/backup.conf")

    def test_glob_characters_are_literal(self):
        """Test that configured paths never act as wildcards."""
        rules = DirectiveExclusionRules(Config(excludes=["/srv/*.log"]))
        assert rules.exclude("/srv/*.log")
        assert not rules.exclude("/srv/app.log")

    def test_relative_paths(self):
        """Test that relative entries match relative query paths only."""
        rules = DirectiveExclusionRules(Config(excludes=["build"]))
        assert rules.exclude("build/out.o")
        assert rules.exclude("./build/out.o")
        assert not rules.exclude("src/build.py")
        assert not rules.exclude("/build/out.o")

    def test_absolute_paths_do_not_match_relative_queries(self):
        """Test that absolute entries ignore relative query paths."""
        rules = DirectiveExclusionRules(Config(excludes=["/build"]))
        assert rules.exclude("/build/out.o")
        assert not rules.exclude("build/out.o")

    def test_current_dir_prefix(self):
        """Test that a leading ./ is ignored in entries and queries alike."""
        rules = DirectiveExclusionRules(Config(excludes=["./build"]))
        assert rules.exclude("./build/x")
        assert rules.exclude("build/x")
        assert rules.exclude("././build")
        assert not rules.exclude("/build/x")

    def test_relative_include_excludes_absolute_queries(self):
        """Test that includes of one kind still restrict queries of the other."""
        rules = DirectiveExclusionRules(Config(includes=["src"]))
        assert not rules.exclude("src/main.py")
        assert rules.exclude("/src/main.py")

    def test_trailing_backslash(self):
        """Test that a path ending in a backslash is accepted and matched literally."""
        rules = DirectiveExclusionRules(Config(excludes=["/srv/odd\\"]))
        assert rules.exclude("/srv/odd\\")
        assert rules.exclude("/srv/odd\\/file")
        assert not rules.exclude("/srv/odd")

    def test_backslashes_are_literal(self):
        """Test that backslashes in configured paths never act as escapes."""
        rules = DirectiveExclusionRules(Config(excludes=[r"C:\Users\me"]))
        assert rules.exclude(r"C:\Users\me")
        assert not rules.exclude("C:Usersme")

    def test_add_rule_with_backslash(self):
        """Test a directive line whose path holds backslashes."""
        rules = DirectiveExclusionRules()
        rules.add_rule(r"exclude /data/a\*b")
        assert rules.exclude(r"/data/a\*b/c")
        assert not rules.exclude("/data/a*b")
        assert not rules.exclude("/data/axb")


class TestPathToPattern:
    """Test conversion of configured paths to patterns."""

    def test_anchors_absolute_path(self):
        assert path_to_pattern("/home/user") == "/home/user"

    def test_anchors_relative_path(self):
        assert path_to_pattern("build") == "/build"

    def test_drops_current_dir_prefix(self):
        assert path_to_pattern("./build") == "/build"
        assert strip_current_dir("././build/x") == "build/x"

    def test_escapes_backslashes(self):
        assert path_to_pattern("/srv/odd\\") == "/srv/odd\\\\"
        assert path_to_pattern(r"C:\Users") == r"/C:\\Users"

    def test_drops_trailing_slash(self):
        assert path_to_pattern("/srv/data/") == "/srv/data"

    def test_root_matches_everything(self):
        rules = DirectiveExclusionRules(Config(includes=["/"]))
        assert path_to_pattern("/") == "**"
        assert not rules.exclude("/etc/passwd")
