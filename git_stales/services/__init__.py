"""Services used by the git-stales pipeline."""
