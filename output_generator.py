"""Output generator for line balancing results - creates a run folder with CSV, JSON and text summaries."""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from models import LineProblem
from solution import Partition


class OutputGenerator:
    """Generates output files for a balanced line."""

    def __init__(self, partition: Partition, problem: LineProblem, data_file: str,
                 output_base: str = "output"):
        self.partition = partition
        self.problem = problem
        self.data_file = data_file
        self.output_base = Path(output_base)
        self.run_folder: Optional[Path] = None

    def create_output_folder(self) -> Path:
        """Create output folder named after the input file."""
        data_name = Path(self.data_file).stem
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        # output/{data_name}_{timestamp}/
        self.run_folder = self.output_base / f"{data_name}_{timestamp}"
        self.run_folder.mkdir(parents=True, exist_ok=True)

        print(f"\nOutput folder created: {self.run_folder}")
        return self.run_folder

    def export_station_steps_csv(self):
        """Export the step-to-station mapping to CSV."""
        output_path = self.run_folder / "station_steps.csv"

        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['Station', 'Position', 'Step ID', 'Step Name',
                             'Level', 'Sequence Index', 'Duration (s)', 'Bottleneck'])

            for station in self.partition.stations:
                for position, step in enumerate(station.steps, start=1):
                    writer.writerow([
                        station.number,
                        position,
                        step.id,
                        step.name,
                        step.level,
                        step.sequence_index,
                        f"{step.duration:.2f}",
                        step.id == self.partition.bottleneck_id
                    ])

        print(f"Station steps CSV saved to: {output_path}")

    def export_station_summary_csv(self):
        """Export one row per station, as built by Partition.to_dataframe()."""
        output_path = self.run_folder / "station_summary.csv"
        df = self.partition.to_dataframe()
        df.to_csv(output_path, index=False, float_format="%.2f")
        print(f"Station summary CSV saved to: {output_path}")

    def export_result_json(self):
        """Export the result record handed to downstream collaborators."""
        output_path = self.run_folder / "result.json"

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.partition.to_dict(), f, indent=2, ensure_ascii=False)

        print(f"Result JSON saved to: {output_path}")

    def export_balance_summary(self):
        """Export overall summary to text file."""
        output_path = self.run_folder / "balance_summary.txt"

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("=" * 60 + "\n")
            f.write("LINE BALANCING SUMMARY\n")
            f.write("=" * 60 + "\n\n")

            f.write(f"Input file: {self.data_file}\n")
            f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")

            f.write("-" * 40 + "\n")
            f.write("PROBLEM STATISTICS\n")
            f.write("-" * 40 + "\n")
            f.write(f"Total steps: {self.problem.num_steps()}\n")
            f.write(f"Levels: {len(self.problem.get_levels())}\n")
            f.write(f"Total work content: {self.problem.total_work_seconds():.2f} s\n")
            bottleneck = self.problem.get_bottleneck()
            f.write(f"Bottleneck: {bottleneck.name} ({bottleneck.duration:g} s)\n\n")

            f.write("-" * 40 + "\n")
            f.write("BALANCE\n")
            f.write("-" * 40 + "\n")
            f.write(self.partition.summary() + "\n\n")
            f.write(f"Partition valid: {self.partition.is_valid(self.problem)}\n\n")

            f.write("-" * 40 + "\n")
            f.write("OUTPUT FILES\n")
            f.write("-" * 40 + "\n")
            f.write("- station_steps.csv: Step assignments\n")
            f.write("- station_summary.csv: Station loads\n")
            f.write("- result.json: Result record\n")

        print(f"Balance summary saved to: {output_path}")

    def generate_all_outputs(self) -> Path:
        """Generate all output files."""
        self.create_output_folder()

        self.export_station_steps_csv()
        self.export_station_summary_csv()
        self.export_result_json()
        self.export_balance_summary()

        print(f"\nAll outputs generated in: {self.run_folder}")
        return self.run_folder


def generate_outputs(partition: Partition, problem: LineProblem, data_file: str,
                     output_base: str = "output") -> Path:
    """
    Main function to generate all outputs for a balanced line.

    Args:
        partition: The selected partition
        problem: The problem instance
        data_file: Path to the input step file (names the run folder)
        output_base: Parent directory for run folders

    Returns:
        Path to the output folder
    """
    generator = OutputGenerator(partition, problem, data_file, output_base)
    return generator.generate_all_outputs()
