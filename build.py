#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.10"
# ///
"""
Build script for linuxdistro - concatenates src/linuxdistro modules into a
single executable script.

Usage: ./build.py
"""

from pathlib import Path

# Header for the generated script (shebang + uv metadata)
HEADER = '''#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.10"
# ///
"""
linuxdistro - Identify the running Linux distribution, or at least its family.

Usage: linuxdistro [-pn | -k] [-v] [-vb]
"""
'''

# Order matters - modules must be concatenated in dependency order
MODULE_ORDER = [
    "config.py",           # No dependencies
    "status.py",           # Depends on config
    "environment.py",      # No local dependencies
    "os_release.py",       # Depends on config, status
    "kernel.py",           # Depends on config, environment, status
    "package_manager.py",  # Depends on config, environment
    "engine.py",           # Depends on everything above
    "cli.py",              # Depends on engine
]

PACKAGE = "linuxdistro"


def is_local_import(statement: str) -> bool:
    """Check whether an import statement refers to the package itself."""
    return (
        statement.startswith(f"from {PACKAGE} ")
        or statement.startswith(f"from {PACKAGE}.")
        or statement == f"import {PACKAGE}"
        or statement.startswith(f"import {PACKAGE}.")
    )


def extract_imports(content: str) -> tuple[set[str], str]:
    """Extract module-level import statements and return (imports, remaining code)."""
    imports = set()
    lines = content.split('\n')
    non_import_lines = []
    in_imports = True
    in_multiline_import = False
    current_import = []

    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        # Handle multi-line imports
        if in_multiline_import:
            current_import.append(line)
            if ')' in line:
                full_import = '\n'.join(current_import)
                if not is_local_import(current_import[0].strip()):
                    imports.add(full_import)
                current_import = []
                in_multiline_import = False
            i += 1
            continue

        # Skip empty lines and comments at the start
        if in_imports and (not stripped or stripped.startswith('#')):
            if stripped.startswith('#'):
                non_import_lines.append(line)
            i += 1
            continue

        # Only extract module-level imports (no indentation)
        if line and not line[0].isspace() and (stripped.startswith('from ') or stripped.startswith('import ')):
            if '(' in line and ')' not in line:
                in_multiline_import = True
                current_import = [line]
                i += 1
                continue

            if not is_local_import(stripped):
                imports.add(line)
        else:
            in_imports = False
            non_import_lines.append(line)

        i += 1

    return imports, '\n'.join(non_import_lines)


def normalize_import(imp: str) -> tuple[str, set[str]]:
    """Normalize an import statement and extract module and names.

    Returns (module, {names}) or (full_import, set()) for simple imports.
    """
    imp = imp.strip()

    # Handle 'from X import Y, Z' or 'from X import (Y, Z)'
    if imp.startswith('from '):
        rest = imp[5:]
        if ' import ' in rest:
            module, names_part = rest.split(' import ', 1)
            names_part = names_part.strip().strip('()')
            names_part = ' '.join(names_part.split())
            names = {n.strip().rstrip(',') for n in names_part.replace('\n', ',').split(',') if n.strip()}
            return f'from {module} import', names

    # Simple import
    return imp, set()


def merge_imports(imports: set[str]) -> list[str]:
    """Merge imports from the same module."""
    module_names: dict[str, set[str]] = {}
    simple_imports = []

    for imp in imports:
        module_prefix, names = normalize_import(imp)
        if names:
            module_names.setdefault(module_prefix, set()).update(names)
        else:
            simple_imports.append(module_prefix)

    result = []
    for module_prefix, names in sorted(module_names.items()):
        sorted_names = sorted(names)
        if len(sorted_names) <= 3:
            result.append(f'{module_prefix} {", ".join(sorted_names)}')
        else:
            names_str = ',\n    '.join(sorted_names)
            result.append(f'{module_prefix} (\n    {names_str},\n)')

    result.extend(sorted(set(simple_imports)))
    return result


def sort_imports(imports: set[str]) -> str:
    """Sort and deduplicate imports: __future__ first, then the standard library."""
    merged = merge_imports(imports)

    future = [imp for imp in merged if imp.startswith('from __future__')]
    stdlib = [imp for imp in merged if not imp.startswith('from __future__')]

    result = []
    if future:
        result.extend(sorted(future))
        result.append('')
    if stdlib:
        result.extend(sorted(stdlib))
        result.append('')

    return '\n'.join(result)


def build(output_path: Path | None = None) -> bool:
    """Build the single-file linuxdistro script from src/linuxdistro modules."""
    src_dir = Path(__file__).parent / "src" / PACKAGE
    if output_path is None:
        output_path = Path(__file__).parent / PACKAGE

    if not src_dir.exists():
        print(f"Error: {src_dir} does not exist")
        return False

    all_imports = set()
    all_code = []

    for module_name in MODULE_ORDER:
        module_path = src_dir / module_name
        if not module_path.exists():
            print(f"Error: {module_path} does not exist")
            return False

        imports, code = extract_imports(module_path.read_text())
        all_imports.update(imports)

        all_code.append(f"\n# === {module_name} ===\n")
        all_code.append(code.strip())

    output = HEADER
    output += sort_imports(all_imports)
    output += '\n'.join(all_code)
    output += '\n'

    output_path.write_text(output)
    output_path.chmod(0o755)

    print(f"Built {output_path} ({len(output.splitlines())} lines)")
    return True


if __name__ == "__main__":
    raise SystemExit(0 if build() else 1)
