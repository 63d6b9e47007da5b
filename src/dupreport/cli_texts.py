DESCRIPTION_TEXT = "dupreport — find duplicate files by content and write a plain-text report"

EXTENSIONS_HELP_TEXT = (
    "File extensions (space separated) to include, case-insensitive.\n"
    "The leading dot is optional (e.g., .jpg png)"
)

OUTPUT_HELP_TEXT = (
    "Report file path.\n"
    "Default: duplicates.txt inside the scanned directory (never scanned itself)"
)

EPILOG_TEXT = """
Examples:
  Basic usage - write duplicates.txt into the Downloads folder
  %(prog)s ~/Downloads

  Only compare images and write the report elsewhere
  %(prog)s ~/Pictures -x .jpg .png -o ~/pictures-duplicates.txt

  Print the report to stdout (progress is hidden when piping)
  %(prog)s ~/Downloads --stdout > report.txt

  Show statistics about the scan
  %(prog)s ~/Downloads --verbose
"""
