import asyncio
import time

from featherdev.bundler import BuildResult, OutputFile

CSS = "body{color:red}"


def script_ok(source):
    return BuildResult(output_files=[OutputFile("build/index.js", source.encode())])


def script_error(*errors):
    return BuildResult(errors=list(errors))


def styles_ok(css=CSS):
    return BuildResult(output_files=[OutputFile("build/index.css", css.encode())])


class FakeBundler:
    """Stands in for Esbuild; script results are handed out in order."""

    def __init__(self, *script_results):
        self.script_results = list(script_results)
        self.script_builds = 0

    def build_styles(self, entry):
        return styles_ok()

    async def build_script(self, entry):
        self.script_builds += 1
        return self.script_results.pop(0)


class SourceBundler:
    """Bundles the entry file as-is; a file containing ``SYNTAX ERROR`` fails."""

    def __init__(self):
        self.script_builds = 0
        self.failures = 0

    def build_styles(self, entry):
        return styles_ok()

    async def build_script(self, entry):
        self.script_builds += 1
        source = entry.read_text()
        if "SYNTAX ERROR" in source:
            self.failures += 1
            return script_error(f"{entry.name}:1:0: ERROR: Unexpected token")
        return script_ok(source)


async def eventually(predicate, timeout=10.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.05)
