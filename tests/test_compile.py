import subprocess
import sys
from pathlib import Path


def test_compile():
    import localenu
    import localenu.calc
    import localenu.coordinates
    import localenu.ellipsoid
    import localenu.transforms
    import localenu.utils.logging

    for name in localenu.__all__:
        assert hasattr(localenu, name)

    assert localenu.__version__


def test_compile_without_optional_packages():
    # pyproj is a test-only oracle; base modules must not pull it in
    code = (
        'import sys, localenu, localenu.transforms, localenu.calc; '
        'sys.exit(1 if "pyproj" in sys.modules else 0)'
    )
    root = Path(__file__).resolve().parents[1]
    result = subprocess.run([sys.executable, '-c', code], cwd=root, check=False)
    assert result.returncode == 0
