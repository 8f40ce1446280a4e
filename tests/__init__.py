"""
Only the root tests directory keeps an __init__.py; subdirectories under tests/ work as
namespace packages (PEP 420).

Keeping this file makes pytest treat tests/ as a package, which gives consistent imports
across environments and avoids module-name clashes between test files in different folders.
"""
