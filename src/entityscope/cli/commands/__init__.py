"""Subcommand handlers for the entityscope CLI."""
