"""Shared cross-cutting helpers (telemetry, datetime). No business logic."""
