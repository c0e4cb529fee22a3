"""
Official Order Module
Sorts Tailwind classes in the order used by prettier-plugin-tailwindcss by
running a small Node.js script around @herb-tools/tailwind-class-sorter.
"""

import json
import logging
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_SORTER_MODULE = '@herb-tools/tailwind-class-sorter'
DEFAULT_TIMEOUT = 10.0

# Reads the class string on stdin, writes the sorted string on stdout
NODE_SORT_SCRIPT = """
const { sortTailwindClasses } = require(__MODULE__);
let input = '';
process.stdin.setEncoding('utf8');
process.stdin.on('data', (chunk) => { input += chunk; });
process.stdin.on('end', async () => {
  try {
    process.stdout.write(await sortTailwindClasses(input));
  } catch (error) {
    console.error(String(error));
    process.exit(1);
  }
});
"""


class OracleError(RuntimeError):
    """Raised when the Node.js class sorter cannot produce an order."""


class NodeClassOrderOracle:
    """
    Callable ordering oracle: "px-3 flex h-9" -> "flex h-9 px-3".

    One node process is started per call. The sorter module must be
    resolvable from ``cwd`` (usually the project holding node_modules).
    """

    def __init__(self, node_executable: str = 'node', module: str = DEFAULT_SORTER_MODULE,
                 timeout: float = DEFAULT_TIMEOUT, cwd: Optional[str] = None):
        self.node_executable = node_executable
        self.module = module
        self.timeout = timeout
        self.cwd = cwd

    def build_script(self) -> str:
        return NODE_SORT_SCRIPT.replace('__MODULE__', json.dumps(self.module))

    def __call__(self, class_string: str) -> str:
        logger.info(f"Sorting {len(class_string.split())} class(es) with {self.module}")
        try:
            result = subprocess.run(
                [self.node_executable, '-e', self.build_script()],
                input=class_string,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
                cwd=self.cwd,
            )
        except FileNotFoundError as e:
            raise OracleError(f"Node.js executable not found: {self.node_executable}") from e
        except subprocess.TimeoutExpired as e:
            raise OracleError(f"Class sorter timed out after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            raise OracleError(f"Class sorter failed: {(e.stderr or '').strip()}") from e
        return result.stdout.strip()
