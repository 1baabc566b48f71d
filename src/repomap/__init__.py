"""Symbol and dependency map for JS/TS, Flutter, and Android codebases."""
