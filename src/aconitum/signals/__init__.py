# topmark:header:start
#
#   project      : Aconitum
#   file         : __init__.py
#   file_relpath : src/aconitum/signals/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Human-friendly process signal tables.

Every signal carries its description, default action and defining standard,
normalized against the ``signal`` module of the running platform.

Example:
    ```python
    from aconitum.signals.main import signals_by_name

    signals_by_name["SIGINT"].description  # 'User interruption with CTRL-C'
    ```
"""
