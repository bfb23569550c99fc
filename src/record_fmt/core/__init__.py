"""Value model, errors, logging and configuration for Record Fmt."""
