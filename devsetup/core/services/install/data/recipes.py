"""
L0 Data — Tool recipe registry.

Pure data, no logic.  Two kinds of recipe:

    package tools   installed through the host package manager
                    (``package`` key, optional ``cask`` for brew)
    go tools        installed with ``go install <module>@latest``
                    (``module`` key)

Every recipe carries ``cli`` (binary looked up on PATH) and ``verify``
(command whose first output line is reported as the version).
"""

from __future__ import annotations

TOOL_RECIPES: dict[str, dict] = {

    # ── Toolchain ───────────────────────────────────────────────

    "go": {
        "cli": "go",
        "label": "Go toolchain",
        "verify": ["go", "version"],
    },

    # ── Package-manager tools ───────────────────────────────────

    "tmux": {
        "cli": "tmux",
        "label": "tmux",
        "package": "tmux",
        # capital V, no dashes
        "verify": ["tmux", "-V"],
        "config_hint": "~/.config/tmux/tmux.conf",
    },
    "nvim": {
        "cli": "nvim",
        "label": "Neovim",
        "package": "neovim",
        "verify": ["nvim", "--version"],
        "config_hint": "~/.config/nvim/init.vim",
        # Installed alongside when Go is present
        "companions": ["gopls"],
    },
    "alacritty": {
        "cli": "alacritty",
        "label": "Alacritty",
        "package": "alacritty",
        "cask": True,
        "verify": ["alacritty", "--version"],
        "config_hint": "~/.config/alacritty/alacritty.yml",
    },

    # ── Go tools ────────────────────────────────────────────────

    "gopls": {
        "cli": "gopls",
        "description": "language server",
        "module": "golang.org/x/tools/gopls",
        "verify": ["gopls", "version"],
    },
    "goimports": {
        "cli": "goimports",
        "description": "import formatter",
        "module": "golang.org/x/tools/cmd/goimports",
        "verify": None,
    },
    "staticcheck": {
        "cli": "staticcheck",
        "description": "static analyzer",
        "module": "honnef.co/go/tools/cmd/staticcheck",
        "verify": ["staticcheck", "-version"],
    },
    "godoc": {
        "cli": "godoc",
        "description": "documentation",
        "module": "golang.org/x/tools/cmd/godoc",
        "verify": None,
    },
    "air": {
        "cli": "air",
        "description": "live reload for web development",
        "module": "github.com/air-verse/air",
        "verify": ["air", "-v"],
        "usage": "air                    # Live reload (in web project directory)",
    },
    "dlv": {
        "cli": "dlv",
        "description": "delve debugger for complex debugging",
        "module": "github.com/go-delve/delve/cmd/dlv",
        "verify": ["dlv", "version"],
        "usage": "dlv debug              # Debug current package",
    },
    "golangci-lint": {
        "cli": "golangci-lint",
        "description": "comprehensive linter suite",
        "module": "github.com/golangci/golangci-lint/cmd/golangci-lint",
        "verify": ["golangci-lint", "--version"],
        "usage": "golangci-lint run      # Run comprehensive linting",
    },
}


GO_TOOL_SETS: dict[str, dict] = {
    "quality": {
        "title": "Go Quality Tools Installer",
        "tools": ["gopls", "goimports", "staticcheck", "godoc"],
        "notes": [],
    },
    "workflow": {
        "title": "Go Workflow Tools Installer",
        "tools": ["air", "dlv", "golangci-lint"],
        "notes": [
            "These are convenience tools for development workflow.",
            "Not essential for learning Go fundamentals.",
        ],
    },
    # Installed by the hardened toolchain installer after Go itself
    "dev": {
        "title": "Go development tools",
        "tools": ["gopls", "goimports", "golangci-lint", "dlv", "air"],
        "notes": [],
    },
}

PACKAGE_TOOLS: tuple[str, ...] = tuple(
    tool_id for tool_id, recipe in TOOL_RECIPES.items() if "package" in recipe
)
