#experiments.py
import filecmp
import os
import time

from .codecs import GrinCodecFile
from .frequency import create_frequency_table
from .huffman import HuffmanTree
from .logger import Logger
from .performance_display import CodeLengthDisplay


def _growing_pattern(size):
    # [0], [0, 1], [0, 1, 2], ... up to [0..255], then again from [0]
    data = bytearray()
    group = 1
    while len(data) < size:
        data.extend(range(group))
        group = group + 1 if group < 256 else 1
    return bytes(data[:size])


def _fibonacci_pattern(size):
    # Fibonacci numbers, big-endian, widening once a number no longer fits
    data = bytearray()
    a, b = 0, 1
    width = 1
    while len(data) < size:
        if a >= 256 ** width:
            width += 1
        data.extend(a.to_bytes(width, byteorder='big'))
        a, b = b, a + b
    return bytes(data[:size])


PATTERNS = {
    'ones.bin': lambda size: b'\x01' * size,
    'pattern123.bin': lambda size: (bytes([1, 2, 3]) * (size // 3 + 1))[:size],
    'growing_pattern.bin': _growing_pattern,
    'fibonacci.bin': _fibonacci_pattern,
    'random.bin': os.urandom,
}


def generate_pattern_files(output_folder, file_size=1000):
    """
    Write one file per entry of PATTERNS into output_folder.

    Returns:
        list[str]: Paths of the generated files.
    """
    if not os.path.exists(output_folder):
        os.makedirs(output_folder)
    paths = []
    for file_name, generate in PATTERNS.items():
        path = os.path.join(output_folder, file_name)
        with open(path, 'wb') as f:
            f.write(generate(file_size))
        paths.append(path)
    return paths


class HuffmanExperiment:
    def __init__(self, name: str, input_file_path, experiment_root_folder_path):

        self.name = name

        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path

        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        input_file_name = os.path.basename(input_file_path)
        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}.grin")
        self.decompressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}_decompressed")

        self.compression_logger = Logger()
        self.decompression_logger = Logger()
        self.codec = GrinCodecFile()

    def run(self):
        self.input_file_size = os.path.getsize(self.input_file_path)

        self.compression_start_time = time.time()
        self.codec.compress(self.input_file_path, self.compressed_file_path, self.compression_logger)
        self.compression_end_time = time.time()

        self.decompression_start_time = time.time()
        self.codec.decompress(self.compressed_file_path, self.decompressed_file_path, self.decompression_logger)
        self.decompression_end_time = time.time()

        self.compressed_file_size = os.path.getsize(self.compressed_file_path)
        self.decompressed_file_size = os.path.getsize(self.decompressed_file_path)

        self.compression_ratio = self.input_file_size / self.compressed_file_size
        self.is_lossless = filecmp.cmp(self.input_file_path, self.decompressed_file_path, shallow=False)

    def save_report_in_text(self, file_path: str):
        if not os.path.exists(os.path.dirname(file_path)):
            raise FileNotFoundError(f"Folder {os.path.dirname(file_path)} not found.")
        if not os.access(os.path.dirname(file_path), os.W_OK):
            raise PermissionError(f"Folder {os.path.dirname(file_path)} is not writable.")

        if not hasattr(self, 'compression_start_time'):
            raise RuntimeError("The experiment has not been run yet.")

        with open(file_path, 'w') as f:
            f.write(f"Experiment name: {self.name}\n")
            f.write(f"Input file size: {self.input_file_size}\n")
            f.write(f"Compression time: {self.compression_end_time - self.compression_start_time}\n")
            f.write(f"Decompression time: {self.decompression_end_time - self.decompression_start_time}\n")
            f.write(f"Compressed file size: {self.compressed_file_size}\n")
            f.write(f"Decompressed file size: {self.decompressed_file_size}\n")
            f.write(f"Compression ratio: {self.compression_ratio}\n")
            f.write(f"Lossless: {self.is_lossless}\n")

        self.compression_logger.save(os.path.join(self.experiment_folder_path, f"{self.name}_compression_log.txt"))
        self.decompression_logger.save(os.path.join(self.experiment_folder_path, f"{self.name}_decompression_log.txt"))

    def display_graphs(self):
        if not hasattr(self, 'compression_start_time'):
            raise RuntimeError("The experiment has not been run yet.")

        frequencies = create_frequency_table(self.input_file_path)
        display = CodeLengthDisplay(HuffmanTree(frequencies), frequencies)
        display.generate_code_length_plot(save_path=os.path.join(self.experiment_folder_path, f"{self.name}_code_lengths.png"))
        display.generate_code_length_histogram(save_path=os.path.join(self.experiment_folder_path, f"{self.name}_code_length_histogram.png"))


if __name__ == '__main__':
    experiments_output_path = 'experiments_out'
    patterns_path = os.path.join(experiments_output_path, 'patterns')

    for input_path in generate_pattern_files(patterns_path):
        experiment_name = f"huffman_{os.path.splitext(os.path.basename(input_path))[0]}_{time.strftime('%Y%m%d_%H%M%S')}"
        experiment = HuffmanExperiment(experiment_name, input_path, experiments_output_path)
        experiment.run()
        experiment.save_report_in_text(os.path.join(experiments_output_path, experiment_name, f"{experiment_name}.txt"))
        experiment.display_graphs()
