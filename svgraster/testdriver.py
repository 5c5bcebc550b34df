"""Regression runner comparing converted SVG files with expected PNG images."""

from __future__ import annotations

import contextlib
import itertools
import os
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path

from .convert import convert
from .png_image import PNGImage

LOG_FILE_NAME = "test_log.txt"


def images_match(expected: PNGImage, actual: PNGImage) -> bool:
    """Return whether two images are identical, printing the first difference found."""
    if (expected.width, expected.height) != (actual.width, actual.height):
        print(
            "Images have different dimensions: "
            f"{expected.width}x{expected.height} != {actual.width}x{actual.height}"
        )
        return False
    for x, y in itertools.product(range(expected.width), range(expected.height)):
        c1, c2 = expected[x, y], actual[x, y]
        if c1 != c2:
            print(
                f"pixel ({x} {y}): expected {c1.red} {c1.green} {c1.blue} "
                f"got {c2.red} {c2.green} {c2.blue}"
            )
            return False
    return True


class TestDriver:
    """Runs conversion tests found under ``<root>/input`` against ``<root>/expected``.

    Converted images are written to ``<root>/output`` and details of each
    test go to ``<root>/test_log.txt``.
    """

    __test__ = False

    def __init__(self, root_path: str | os.PathLike) -> None:
        self.root_path = Path(root_path)
        self.log_path = self.root_path / LOG_FILE_NAME
        self.total_tests = 0
        self.passed_tests = 0
        self.failed_tests = 0
        self.log_path.write_text("")

    def _run_conversion_test(self, test_id: str) -> bool:
        svg_file = self.root_path / "input" / f"{test_id}.svg"
        exp_file = self.root_path / "expected" / f"{test_id}.png"
        out_file = self.root_path / "output" / f"{test_id}.png"
        convert(svg_file, out_file)
        return images_match(PNGImage.load(exp_file), PNGImage.load(out_file))

    def _run_test(self, test_id: str) -> None:
        self.total_tests += 1
        print(f"[{self.total_tests}] {test_id}: ", end="", flush=True)
        with self.log_path.open("a") as log:
            log.write(f">>>> [{self.total_tests}] {test_id} <<<<\n")
            log.flush()
            with contextlib.redirect_stdout(log), contextlib.redirect_stderr(log):
                try:
                    success = self._run_conversion_test(test_id)
                except Exception:
                    traceback.print_exc()
                    success = False
        print("pass" if success else "fail")
        if success:
            self.passed_tests += 1
        else:
            self.failed_tests += 1

    def run_tests(self, spec: str) -> None:
        """Run every test whose input file name starts with ``spec``, in name order."""
        dir_path = self.root_path / "input"
        try:
            entries = list(os.scandir(dir_path))
        except OSError:
            print(f"Unable to open input directory {dir_path}", file=sys.stderr)
            return
        test_ids = sorted(
            entry.name.rpartition(".")[0] if "." in entry.name else entry.name
            for entry in entries
            if entry.is_file(follow_symlinks=False) and entry.name.startswith(spec)
        )
        if not test_ids:
            print(f"No scripts matched the spec: {spec}")
            return

        print(f"== {len(test_ids)} tests to execute  ==")
        for test_id in test_ids:
            self._run_test(test_id)

        print("== TEST EXECUTION SUMMARY ==")
        print(f"Total tests: {self.total_tests}")
        print(f"Passed tests: {self.passed_tests}")
        print(f"Failed tests: {self.failed_tests}")
        print(f"See {LOG_FILE_NAME} for details.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run tests matching an optional name prefix under an optional root directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    driver = TestDriver(args[1] if len(args) == 2 else ".")
    driver.run_tests(args[0] if args else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())