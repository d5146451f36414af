"""Click commands for the dm-transpiler CLI."""
