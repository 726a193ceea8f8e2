"""Known daemon commands, shown by `fifoctl list`.

Informational only: `send` passes any text through unchecked.
"""

# (command, argument hint)
COMMANDS: list[tuple[str, str]] = [
    ("UnloadTheme", ""),
    ("SoftReload", ""),
    ("ToggleFullScreen", ""),
    ("ToggleSticky", ""),
    ("SwapScreens", ""),
    ("MoveWindowToNextTag", ""),
    ("MoveWindowToPreviousTag", ""),
    ("MoveWindowToLastWorkspace", ""),
    ("MoveWindowToNextWorkspace", ""),
    ("MoveWindowToPreviousWorkspace", ""),
    ("FloatingToTile", ""),
    ("TileToFloating", ""),
    ("ToggleFloating", ""),
    ("MoveWindowUp", ""),
    ("MoveWindowDown", ""),
    ("MoveWindowTop", ""),
    ("FocusWindowUp", ""),
    ("FocusWindowDown", ""),
    ("FocusWindowTop", ""),
    ("FocusWorkspaceNext", ""),
    ("FocusWorkspacePrevious", ""),
    ("NextLayout", ""),
    ("PreviousLayout", ""),
    ("RotateTag", ""),
    ("ReturnToLastTag", ""),
    ("CloseWindow", ""),
    ("LoadTheme", "<path/to/theme.ron>"),
    ("AttachScratchPad", "<ScratchpadName>"),
    ("ReleaseScratchPad", "<tag_index> or <ScratchpadName>"),
    ("NextScratchPadWindow", "<ScratchpadName>"),
    ("PrevScratchPadWindow", "<ScratchpadName>"),
    ("ToggleScratchPad", "<ScratchpadName>"),
    ("SendWorkspaceToTag", "<workspace_index> <tag_index> (int)"),
    ("SendWindowToTag", "<tag_index> (int)"),
    ("SetLayout", "<LayoutName>"),
    ("SetMarginMultiplier", "<multiplier-value> (float)"),
    ("FocusWindow", "<WindowClass> or <visible-window-index> (int)"),
    ("FocusNextTag", "<behavior> (string, optional)"),
    ("FocusPreviousTag", "<behavior> (string, optional)"),
]


def render() -> list[str]:
    """Render the catalog as aligned text lines."""
    width = max(len(name) for name, _ in COMMANDS)
    lines = ["Commands without arguments:", ""]
    lines.extend(f"  {name}" for name, args in COMMANDS if not args)
    lines.extend(["", "Commands with arguments (quote the command and its arguments together):", ""])
    lines.extend(f"  {name.ljust(width)}  Args: {args}" for name, args in COMMANDS if args)
    return lines
