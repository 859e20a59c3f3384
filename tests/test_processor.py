import logging

from cherry_train.config import Config
from cherry_train.errors import GitCommandError, NotARepositoryError
from cherry_train.git_adapter import GitClient
from cherry_train.processor import ProcessingOutcome, RevisionProcessor, run_revisions
from cherry_train.runner import CommandResult


class ScriptedRunner:
    """
    Fake runner that records every command and fails the ones listed.
    """

    def __init__(self, failing=()):
        self.failing = {tuple(args) for args in failing}
        self.calls = []

    def __call__(self, program, args, cwd=None):
        args = tuple(args)
        self.calls.append(args)
        if args in self.failing:
            return CommandResult(succeeded=False, output=f"{' '.join(args)}: boom")
        return CommandResult(succeeded=True, output="")

    def count(self, subcommand):
        return sum(1 for args in self.calls if args[0] == subcommand)


def _processor(runner):
    return RevisionProcessor(GitClient(runner=runner))


def test_run_processes_all_revisions_in_order():
    runner = ScriptedRunner()

    outcome = _processor(runner).run(["a", "b", "c"])

    assert outcome.successful == ["a", "b", "c"]
    assert outcome.failed == []
    assert outcome.all_succeeded
    assert runner.calls == [
        ("rev-parse", "--git-dir"),
        ("reset", "--hard"),
        ("pull",),
        ("cherry-pick", "a"),
        ("push",),
        ("cherry-pick", "b"),
        ("push",),
        ("cherry-pick", "c"),
        ("push",),
    ]


def test_failed_cherry_pick_is_aborted_before_next_revision():
    runner = ScriptedRunner(failing=[("cherry-pick", "b")])

    outcome = _processor(runner).process(["a", "b", "c"])

    assert outcome.successful == ["a", "c"]
    assert outcome.failed == ["b"]
    assert runner.count("cherry-pick") == 4
    assert runner.calls == [
        ("cherry-pick", "a"),
        ("push",),
        ("cherry-pick", "b"),
        ("cherry-pick", "--abort"),
        ("cherry-pick", "c"),
        ("push",),
    ]


def test_push_failure_records_revision_as_failed_without_abort():
    runner = ScriptedRunner(failing=[("push",)])

    outcome = _processor(runner).process(["a"])

    assert outcome.successful == []
    assert outcome.failed == ["a"]
    assert ("cherry-pick", "--abort") not in runner.calls


def test_abort_failure_is_only_a_warning(caplog):
    runner = ScriptedRunner(failing=[("cherry-pick", "a"), ("cherry-pick", "--abort")])

    with caplog.at_level(logging.WARNING, logger="cherry_train.processor"):
        outcome = _processor(runner).process(["a", "b"])

    assert outcome.failed == ["a"]
    assert outcome.successful == ["b"]
    assert any(
        record.levelno == logging.WARNING and "Failed to abort cherry-pick" in record.getMessage()
        for record in caplog.records
    )


def test_outcome_partitions_input_and_keeps_duplicates():
    revisions = ["a", "b", "a", "c", "d", "b"]
    runner = ScriptedRunner(failing=[("cherry-pick", "b"), ("cherry-pick", "d")])

    outcome = _processor(runner).process(revisions)

    assert outcome.total == len(revisions)
    assert outcome.successful == ["a", "a", "c"]
    assert outcome.failed == ["b", "d", "b"]
    assert sorted(outcome.successful + outcome.failed) == sorted(revisions)


def test_repository_check_failure_processes_nothing():
    runner = ScriptedRunner(failing=[("rev-parse", "--git-dir")])

    try:
        _processor(runner).run(["a", "b"])
    except NotARepositoryError as exc:
        assert "not inside a git repository" in str(exc)
    else:
        raise AssertionError("expected NotARepositoryError to be raised")

    assert runner.calls == [("rev-parse", "--git-dir")]
    assert runner.count("cherry-pick") == 0
    assert runner.count("push") == 0


def test_reset_failure_stops_before_pull():
    runner = ScriptedRunner(failing=[("reset", "--hard")])

    try:
        _processor(runner).run(["a"])
    except GitCommandError as exc:
        assert exc.command == "git reset --hard"
        assert "boom" in str(exc)
    else:
        raise AssertionError("expected GitCommandError to be raised")

    assert runner.calls == [("rev-parse", "--git-dir"), ("reset", "--hard")]


def test_pull_failure_processes_no_revisions():
    runner = ScriptedRunner(failing=[("pull",)])

    try:
        _processor(runner).run(["a"])
    except GitCommandError as exc:
        assert exc.command == "git pull"
    else:
        raise AssertionError("expected GitCommandError to be raised")

    assert runner.count("cherry-pick") == 0
    assert runner.count("push") == 0


def test_run_revisions_uses_config_repo_and_executable():
    seen = []

    def runner(program, args, cwd=None):
        seen.append((program, cwd))
        return CommandResult(succeeded=True, output="")

    config = Config(revisions=["a"], repo="/srv/repo", git="/usr/bin/git")
    outcome = run_revisions(config.revisions, config, runner=runner)

    assert outcome == ProcessingOutcome(successful=["a"], failed=[])
    assert set(seen) == {("/usr/bin/git", "/srv/repo")}
