"""SupabaseCli: provisions a hosted Supabase project through the supabase CLI."""

SUPABASE = "supabase"


class SupabaseCli:
    """Runs the supabase CLI through a CommandRunner.

    Every command inherits the terminal so the CLI can open a browser for
    login and ask its own questions.
    """

    def __init__(self, runner):
        self._runner = runner

    def login(self, cwd=None):
        self._runner.run([SUPABASE, "login"], cwd=cwd)

    def list_projects(self, cwd=None):
        self._runner.run([SUPABASE, "projects", "list"], cwd=cwd)

    def create_project(self, name, cwd=None):
        self._runner.run([SUPABASE, "projects", "create", name, "--interactive"], cwd=cwd)
