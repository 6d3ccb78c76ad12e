"""Built-in CLI sub-command groups for oascompat.

* :mod:`~oascompat.commands.config` -- view and modify stored settings.

The document commands (``check``, ``summary``, ``schemas``, ``content``) are
registered directly on the root app in :mod:`oascompat.app`.
"""
