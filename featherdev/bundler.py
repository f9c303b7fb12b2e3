"""esbuild, driven through its command line with output captured in memory.

Nothing is written to ``build/``: esbuild prints the bundle on stdout when no
outfile is given, and the logical paths below only tell the assembler which
marker a bundle belongs to.
"""
import asyncio
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

OUT_DIR = "build"

STYLE_OPTIONS = [
    "--bundle",
    "--log-level=error",
]

SCRIPT_OPTIONS = [
    "--bundle",
    "--sourcemap=inline",
    "--format=iife",
    "--platform=browser",
    "--target=es2015",
    '--define:process.env.NODE_ENV="development"',
    '--define:process.env.NODE_DEBUG="debug"',
    "--log-level=error",
]


class BundlerNotFound(RuntimeError):
    pass


class BuildFailed(RuntimeError):
    def __init__(self, errors):
        super().__init__("\n".join(errors))
        self.errors = errors


@dataclass
class OutputFile:
    path: str
    contents: bytes

    @property
    def text(self):
        return self.contents.decode("utf-8")


@dataclass
class BuildResult:
    output_files: list = field(default_factory=list)
    errors: list = field(default_factory=list)


def find_esbuild(root):
    """Locate the esbuild binary: the project's node_modules first, then PATH."""
    local = Path(root) / "node_modules" / ".bin" / "esbuild"
    if local.exists():
        return str(local)
    found = shutil.which("esbuild")
    if found:
        return found
    raise BundlerNotFound(
        "esbuild not found. Install with: npm install (or npm install -g esbuild)"
    )


def _output_path(root, entry, suffix):
    return str(Path(root) / OUT_DIR / (Path(entry).stem + suffix))


def _result(returncode, stdout, stderr, path):
    if returncode != 0:
        message = stderr.decode("utf-8", "replace").strip()
        return BuildResult(errors=message.splitlines() or [f"esbuild exited with status {returncode}"])
    return BuildResult(output_files=[OutputFile(path, stdout)])


class Esbuild:
    def __init__(self, root, executable=None):
        self.root = Path(root)
        self.executable = executable or find_esbuild(self.root)

    def _command(self, entry, options):
        return [self.executable, str(Path(entry).relative_to(self.root)), *options]

    def build_styles(self, entry):
        """Bundle the stylesheet synchronously. Errors raise BuildFailed."""
        proc = subprocess.run(
            self._command(entry, STYLE_OPTIONS),
            cwd=self.root,
            capture_output=True,
        )
        result = _result(proc.returncode, proc.stdout, proc.stderr,
                         _output_path(self.root, entry, ".css"))
        if result.errors:
            raise BuildFailed(result.errors)
        return result

    async def build_script(self, entry):
        """Bundle the application script.

        Errors are reported in the result rather than raised so a broken edit
        doesn't end the watch loop.
        """
        proc = await asyncio.create_subprocess_exec(
            *self._command(entry, SCRIPT_OPTIONS),
            cwd=self.root,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()
        return _result(proc.returncode, stdout, stderr,
                       _output_path(self.root, entry, ".js"))
