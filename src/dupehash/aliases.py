from dupehash.core.models import Column, HashingAlgorithm, ReportMode

COLUMN_ALIASES = {
    "size": Column.SIZE,
    "hash": Column.HASH_VALUE,
    "name": Column.FILE_NAME,
    "directory": Column.DIRECTORY_NAME,
    "dir": Column.DIRECTORY_NAME,
    "attributes": Column.ATTRIBUTES,
    "attrs": Column.ATTRIBUTES,
    "created": Column.CREATED,
    "modified": Column.MODIFIED,
    "accessed": Column.ACCESSED,
}

COLUMN_CHOICES = list(COLUMN_ALIASES.keys())

COLUMNS_HELP_TEXT = (
    "Comma separated list of columns to write (default: all).\n"
    "  size, hash, name, directory (dir), attributes (attrs),\n"
    "  created, modified, accessed\n"
    "Columns are always written in the order above.\n"
    "Example    : %(prog)s ~/Downloads --columns size,hash,name\n"
)

ALGORITHM_FLAGS = {
    "sha256": HashingAlgorithm.SHA256,
    "md5": HashingAlgorithm.MD5,
    "xxh128": HashingAlgorithm.XXH128,
}

REPORT_FLAGS = {
    "dupes": ReportMode.DUPLICATES,
    "all": ReportMode.ALL,
    "stats_only": ReportMode.NONE,
}

EPILOG_TEXT = """
Examples:
  Report duplicate files under Downloads
  %(prog)s ~/Downloads

  Hash every file with MD5 and write all records to a file
  %(prog)s ~/Downloads report.txt --all --md5

  Only print the run statistics
  %(prog)s ~/Downloads --stats-only

Output line format:
  Size,HashValue,"FileName","DirectoryName","Attributes",Created,Modified,Accessed,
"""
