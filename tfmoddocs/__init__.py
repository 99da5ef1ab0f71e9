"""Documentation model of Terraform modules: inputs, outputs, module calls, providers, requirements and resources."""

__version__ = "0.15.0a0"