"""Unit tests for RunnerDispatcher class."""

from unittest.mock import Mock

from quick_check.models import CommandRunner, LocalFileSystem
from quick_check.schemas import Framework, ResolvedTests
from quick_check.services import RunnerDispatcher


class TestRunnerDispatcher:
    """Test cases for RunnerDispatcher class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mock_runner = Mock(spec=CommandRunner)
        self.mock_runner.run.return_value = 0
        self.mock_file_system = Mock(spec=LocalFileSystem)
        self.mock_file_system.is_executable.return_value = False
        self.mock_file_system.is_file.return_value = False
        self.mock_file_system.read_text.return_value = None

    def dispatcher(self, **kwargs):
        return RunnerDispatcher(self.mock_runner, self.mock_file_system, **kwargs)

    def test_rspec_is_batched(self):
        """Test all spec files run in one rspec invocation."""
        commands = self.dispatcher().build_commands(
            Framework.RSPEC, ["spec/a_spec.rb", "spec/b_spec.rb"]
        )

        assert commands == [["bundle", "exec", "rspec", "spec/a_spec.rb", "spec/b_spec.rb"]]

    def test_minitest_with_rails_binstub(self):
        """Test Minitest files are batched through bin/rails when present."""
        self.mock_file_system.is_executable.side_effect = lambda path: path == "bin/rails"

        commands = self.dispatcher().build_commands(
            Framework.MINITEST, ["test/models/user_test.rb"]
        )

        assert commands == [["bin/rails", "test", "test/models/user_test.rb"]]

    def test_minitest_with_rails_in_gemfile(self):
        """Test Rails declared in the Gemfile uses bundle exec rails."""
        self.mock_file_system.is_file.side_effect = lambda path: path == "Gemfile"
        self.mock_file_system.read_text.return_value = 'source "https://rubygems.org"\ngem "rails", "~> 7.1"\n'

        commands = self.dispatcher().build_commands(
            Framework.MINITEST, ["test/models/user_test.rb"]
        )

        assert commands == [["bundle", "exec", "rails", "test", "test/models/user_test.rb"]]

    def test_minitest_gem_name_must_match_exactly(self):
        """Test gems that merely start with rails do not count."""
        self.mock_file_system.is_file.side_effect = lambda path: path == "gems.rb"
        self.mock_file_system.read_text.return_value = "gem 'rails-controller-testing'\n"

        assert self.dispatcher().rails_available() is False

    def test_minitest_per_file_without_rails(self):
        """Test each Minitest file runs on its own without Rails."""
        commands = self.dispatcher().build_commands(
            Framework.MINITEST, ["test/a_test.rb", "test/b_test.rb"]
        )

        assert commands == [
            ["ruby", "-I", "test", "test/a_test.rb"],
            ["ruby", "-I", "test", "test/b_test.rb"],
        ]

    def test_custom_command_overrides_detection(self):
        """Test --cmd replaces auto-detection for both conventions."""
        dispatcher = self.dispatcher(custom_command=["bin/test", "--fail-fast"])

        assert dispatcher.build_commands(Framework.MINITEST, ["test/a_test.rb", "test/b_test.rb"]) == [
            ["bin/test", "--fail-fast", "test/a_test.rb", "test/b_test.rb"]
        ]
        assert dispatcher.build_commands(Framework.RSPEC, ["spec/a_spec.rb"]) == [
            ["bin/test", "--fail-fast", "spec/a_spec.rb"]
        ]
        self.mock_file_system.is_executable.assert_not_called()

    def test_dispatch_prints_then_runs(self, capsys):
        """Test every command is printed and executed."""
        resolved = ResolvedTests(
            rspec=["spec/my spec_spec.rb"], minitest=["test/a_test.rb"]
        )

        result = self.dispatcher().dispatch(resolved)

        assert result == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "bundle exec rspec 'spec/my spec_spec.rb'",
            "ruby -I test test/a_test.rb",
        ]
        assert self.mock_runner.run.call_count == 2

    def test_dispatch_last_failure_wins(self):
        """Test the last non-zero exit code is returned."""
        self.mock_runner.run.side_effect = [3, 1, 0]
        resolved = ResolvedTests(
            rspec=["spec/a_spec.rb"], minitest=["test/a_test.rb", "test/b_test.rb"]
        )

        assert self.dispatcher().dispatch(resolved) == 1
        assert self.mock_runner.run.call_count == 3

    def test_dispatch_dry_run(self, capsys):
        """Test dry runs print every planned command and run nothing."""
        resolved = ResolvedTests(minitest=["test/a_test.rb", "test/b_test.rb"])

        result = self.dispatcher(dry_run=True).dispatch(resolved)

        assert result == 0
        assert capsys.readouterr().out.splitlines() == [
            "ruby -I test test/a_test.rb",
            "ruby -I test test/b_test.rb",
        ]
        self.mock_runner.run.assert_not_called()

    def test_dispatch_skips_empty_conventions(self, capsys):
        """Test a convention without files builds no command."""
        result = self.dispatcher().dispatch(ResolvedTests(rspec=["spec/a_spec.rb"]))

        assert result == 0
        assert capsys.readouterr().out.splitlines() == ["bundle exec rspec spec/a_spec.rb"]
        self.mock_runner.run.assert_called_once_with(["bundle", "exec", "rspec", "spec/a_spec.rb"])
