"""Tests for TemplateCloner against a local template repository."""

import pytest
from git import GitCommandError, Repo

from create_af_app.scaffold.template_cloner import TemplateCloner


def _init_template_repo(path, commits=2):
    """Create a git repo with *commits* commits at the given path."""
    repo = Repo.init(path)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test")
        config.set_value("user", "email", "test@test.com")
    readme = path / "README.md"
    for i in range(commits):
        readme.write_text(f"# template {i}\n")
        repo.index.add([str(readme)])
        repo.index.commit(f"Commit {i}")
    return repo


@pytest.mark.integration
class TestClone:

    def test_clones_template_files(self, tmp_path):
        source = tmp_path / "template"
        _init_template_repo(source)
        target = tmp_path / "my-app"

        TemplateCloner().clone(source.as_uri(), str(target))

        assert (target / "README.md").read_text() == "# template 1\n"
        assert (target / ".git").is_dir()

    def test_clone_is_shallow(self, tmp_path):
        source = tmp_path / "template"
        _init_template_repo(source, commits=3)
        target = tmp_path / "my-app"

        TemplateCloner().clone(source.as_uri(), str(target))

        assert len(list(Repo(target).iter_commits())) == 1

    def test_unreachable_template_raises(self, tmp_path):
        missing = tmp_path / "does-not-exist"

        with pytest.raises(GitCommandError):
            TemplateCloner().clone(missing.as_uri(), str(tmp_path / "my-app"))


@pytest.mark.unit
class TestDetach:

    def test_removes_git_metadata_only(self, tmp_path):
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
        (tmp_path / "package.json").write_text("{}")

        TemplateCloner().detach(str(tmp_path))

        assert not (tmp_path / ".git").exists()
        assert (tmp_path / "package.json").exists()

    def test_missing_git_metadata_is_ignored(self, tmp_path):
        TemplateCloner().detach(str(tmp_path))

        assert tmp_path.exists()
