"""
simulation/ngspice_runner.py

Handles execution of ngspice simulations
"""

import logging
import os
import platform
import shutil
import subprocess
from datetime import datetime

logger = logging.getLogger(__name__)

NGSPICE_INSTALL_PATHS = {
    "Windows": [r"C:\Program Files\Spice64\bin\ngspice.exe"],
    "Linux": ["/usr/bin/ngspice", "/usr/local/bin/ngspice"],
    "Darwin": ["/opt/homebrew/bin/ngspice", "/usr/local/bin/ngspice"],
}


class NgspiceRunner:
    """Runs ngspice simulations and manages output files"""

    def __init__(self, output_dir="simulation_output", timeout=60, ngspice_cmd=None):
        self.output_dir = output_dir
        self.timeout = timeout
        os.makedirs(self.output_dir, exist_ok=True)
        self.ngspice_cmd = ngspice_cmd

    @classmethod
    def from_settings(cls, settings):
        """Create a runner from SimulationSettings."""
        return cls(output_dir=settings.output_dir, timeout=settings.timeout,
                   ngspice_cmd=settings.ngspice_path)

    def find_ngspice(self):
        """
        Resolve the ngspice executable.

        A configured ngspice_cmd wins. Otherwise PATH is searched, then the
        usual install location for this platform. The result is cached.
        """
        if self.ngspice_cmd:
            return self.ngspice_cmd

        found = shutil.which('ngspice')
        if found is None:
            for cmd in NGSPICE_INSTALL_PATHS.get(platform.system(), []):
                if os.path.exists(cmd):
                    found = cmd
                    break

        self.ngspice_cmd = found
        return found

    def run_simulation(self, netlist_content):
        """
        Run ngspice in batch mode on a SPICE deck.

        Returns:
            tuple: (success: bool, output_file: str, stdout: str, stderr: str)
        """
        if self.find_ngspice() is None:
            logger.error("ngspice executable not found")
            return False, None, "", "ngspice executable not found. Please install ngspice."

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        netlist_filename = os.path.join(self.output_dir, f"netlist_{timestamp}.cir")
        output_filename = os.path.join(self.output_dir, f"output_{timestamp}.txt")

        try:
            with open(netlist_filename, 'w') as f:
                f.write(netlist_content)
        except OSError as e:
            logger.error("Failed to write netlist %s: %s", netlist_filename, e)
            return False, None, "", f"Failed to write netlist: {e}"

        logger.info("Running %s on %s", self.ngspice_cmd, netlist_filename)
        try:
            result = subprocess.run(
                [self.ngspice_cmd, '-b', netlist_filename, '-o', output_filename],
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            logger.error("ngspice timed out after %s seconds", self.timeout)
            return False, None, "", f"Simulation timed out (>{self.timeout} seconds)"
        except OSError as e:
            logger.error("Could not start ngspice: %s", e)
            return False, None, "", f"Simulation error: {e}"

        if os.path.exists(output_filename):
            return True, output_filename, result.stdout, result.stderr
        return False, None, result.stdout, result.stderr or "Output file not created"

    def read_output(self, output_filename):
        """Read simulation output file"""
        with open(output_filename, 'r') as f:
            return f.read()
