"""
Services behind the colb commands.

- context: workspace/package detection
- invocation: command-line assembly
- execution: running external tools
- orchestration: build and test step sequencing
"""
