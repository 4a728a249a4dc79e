"""Post-copy fixups applied to the target directory."""

import os

GITIGNORE_ALIAS = "gitignore"
GITIGNORE = ".gitignore"


def restore_gitignore(target_dir, *, alias_copied=True):
    """Rename a top-level ``gitignore`` in *target_dir* to ``.gitignore``.

    The template ships the file without its leading dot. No-op when the alias
    is absent. An existing ``.gitignore`` is never replaced: if the alias was
    produced by the copy that just ran it is discarded, otherwise it belongs
    to the user and is left alone.

    Args:
        target_dir: Directory the template was copied into.
        alias_copied: Whether the copy step wrote ``gitignore`` itself.

    Returns:
        True if the rename happened, False otherwise.
    """
    alias_path = os.path.join(target_dir, GITIGNORE_ALIAS)
    dotfile_path = os.path.join(target_dir, GITIGNORE)

    if not os.path.isfile(alias_path):
        return False

    if os.path.lexists(dotfile_path):
        if alias_copied:
            os.remove(alias_path)
        return False

    os.rename(alias_path, dotfile_path)
    return True
