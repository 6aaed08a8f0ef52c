"""TemplateCloner: materializes the project template on disk."""

import os
import shutil

from git import Repo

GIT_METADATA_DIR = ".git"


class TemplateCloner:
    """Creates a shallow clone of the template repository."""

    def clone(self, template_url, target_path):
        """Clone the latest commit of *template_url* into *target_path*.

        Raises:
            git.GitCommandError: If git cannot clone the repository.
        """
        Repo.clone_from(template_url, target_path, depth=1)

    def detach(self, target_path):
        """Remove the clone's git metadata so the project starts its own history."""
        git_dir = os.path.join(target_path, GIT_METADATA_DIR)
        if os.path.isdir(git_dir):
            shutil.rmtree(git_dir)
