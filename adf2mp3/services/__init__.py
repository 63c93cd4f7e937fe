"""
Services Package for adf2mp3.

- **Transcoder (`transcoder.py`):** validates the input path and streams it
  through the XOR transform into the output file.

- **Logging Service (`logging_service.py`):** appends a record of each run to
  report files, successes as structured YAML and failures as plain text. This
  is separate from the real-time console logging done with loguru.
"""
