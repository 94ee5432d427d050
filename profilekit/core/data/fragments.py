"""
Built-in fragment table — wrappers shipped with profilekit.

Pure data, no logic. Each entry validates into a ``Fragment`` model.
Wrappers forward their extra arguments after ``args``.
"""

from __future__ import annotations

BUILTIN_FRAGMENTS: list[dict] = [

    # ── Version control ─────────────────────────────────────────

    {
        "name": "git",
        "description": "Git shortcuts",
        "wrappers": [
            {"name": "git-status", "command": "git", "args": ["status", "-sb"], "aliases": ["gs"]},
            {"name": "git-log", "command": "git", "args": ["log", "--oneline", "--graph", "--decorate"], "aliases": ["glog"]},
            {"name": "git-pull", "command": "git", "args": ["pull", "--rebase"], "aliases": ["gpl"]},
            {"name": "git-push", "command": "git", "args": ["push"], "aliases": ["gps"]},
            {"name": "git-diff", "command": "git", "args": ["diff"], "aliases": ["gd"]},
        ],
    },
    {
        "name": "gh",
        "description": "GitHub CLI",
        "wrappers": [
            {"name": "gh-pr-list", "command": "gh", "args": ["pr", "list"], "aliases": ["ghprl"]},
            {"name": "gh-pr-checkout", "command": "gh", "args": ["pr", "checkout"], "aliases": ["ghprc"]},
            {"name": "gh-run-watch", "command": "gh", "args": ["run", "watch"]},
        ],
    },
    {
        "name": "lazygit",
        "description": "Terminal UI for git",
        "registration": "always",
        "wrappers": [
            {"name": "lazygit", "command": "lazygit", "aliases": ["lg"]},
        ],
    },

    # ── Containers ──────────────────────────────────────────────

    {
        "name": "docker",
        "description": "Docker engine and compose",
        "wrappers": [
            {"name": "docker-ps", "command": "docker", "args": ["ps"], "aliases": ["dps"]},
            {"name": "docker-images", "command": "docker", "args": ["images"], "aliases": ["di"]},
            {"name": "docker-compose-up", "command": "docker", "args": ["compose", "up", "-d"], "aliases": ["dcu"]},
            {"name": "docker-compose-down", "command": "docker", "args": ["compose", "down"], "aliases": ["dcd"]},
            {"name": "docker-prune", "command": "docker", "args": ["system", "prune", "-f"]},
        ],
    },
    {
        "name": "podman",
        "description": "Podman container engine",
        "wrappers": [
            {"name": "podman-ps", "command": "podman", "args": ["ps"], "aliases": ["pps"]},
            {"name": "podman-images", "command": "podman", "args": ["images"]},
        ],
    },
    {
        "name": "kubectl",
        "description": "Kubernetes CLI",
        "wrappers": [
            {"name": "kube-pods", "command": "kubectl", "args": ["get", "pods"], "aliases": ["kgp"]},
            {"name": "kube-contexts", "command": "kubectl", "args": ["config", "get-contexts"], "aliases": ["kctx"]},
            {"name": "kube-logs", "command": "kubectl", "args": ["logs", "-f"], "aliases": ["kl"]},
        ],
    },

    # ── Language toolchains ─────────────────────────────────────

    {
        "name": "npm",
        "description": "Node package manager",
        "wrappers": [
            {"name": "npm-install", "command": "npm", "args": ["install"], "aliases": ["ni"]},
            {"name": "npm-run", "command": "npm", "args": ["run"], "aliases": ["nr"]},
            {"name": "npm-outdated", "command": "npm", "args": ["outdated"]},
        ],
    },
    {
        "name": "pnpm",
        "description": "pnpm package manager",
        "wrappers": [
            {"name": "pnpm-install", "command": "pnpm", "args": ["install"], "aliases": ["pni"]},
            {"name": "pnpm-run", "command": "pnpm", "args": ["run"], "aliases": ["pnr"]},
        ],
    },
    {
        "name": "pip",
        "description": "Python packages",
        "wrappers": [
            {"name": "pip-install", "command": "pip", "args": ["install"], "aliases": ["pipi"]},
            {"name": "pip-list-outdated", "command": "pip", "args": ["list", "--outdated"]},
        ],
    },
    {
        "name": "uv",
        "description": "uv project and package manager",
        "wrappers": [
            {"name": "uv-sync", "command": "uv", "args": ["sync"]},
            {"name": "uv-run", "command": "uv", "args": ["run"], "aliases": ["uvr"]},
        ],
    },
    {
        "name": "cargo",
        "description": "Rust toolchain",
        "wrappers": [
            {"name": "cargo-build", "command": "cargo", "args": ["build"], "aliases": ["cb"]},
            {"name": "cargo-test", "command": "cargo", "args": ["test"], "aliases": ["ct"]},
            {"name": "cargo-clippy", "command": "cargo", "args": ["clippy"]},
        ],
    },
    {
        "name": "go",
        "description": "Go toolchain",
        "wrappers": [
            {"name": "go-test", "command": "go", "args": ["test", "./..."], "aliases": ["gotest"]},
            {"name": "go-mod-tidy", "command": "go", "args": ["mod", "tidy"]},
        ],
    },

    # ── System package managers ─────────────────────────────────

    {
        "name": "brew",
        "description": "Homebrew",
        "wrappers": [
            {"name": "brew-update", "command": "brew", "args": ["update"]},
            {"name": "brew-upgrade", "command": "brew", "args": ["upgrade"], "aliases": ["bup"]},
            {"name": "brew-cleanup", "command": "brew", "args": ["cleanup"]},
        ],
    },
    {
        "name": "scoop",
        "description": "Scoop (Windows)",
        "wrappers": [
            {"name": "scoop-update", "command": "scoop", "args": ["update", "*"], "aliases": ["sup"]},
            {"name": "scoop-cleanup", "command": "scoop", "args": ["cleanup", "*"]},
        ],
    },

    # ── Cloud CLIs ──────────────────────────────────────────────

    {
        "name": "aws",
        "description": "AWS CLI",
        "wrappers": [
            {"name": "aws-whoami", "command": "aws", "args": ["sts", "get-caller-identity"]},
            {"name": "aws-s3-ls", "command": "aws", "args": ["s3", "ls"]},
        ],
    },
    {
        "name": "az",
        "description": "Azure CLI",
        "wrappers": [
            {"name": "az-account", "command": "az", "args": ["account", "show"]},
        ],
    },
    {
        "name": "gcloud",
        "description": "Google Cloud CLI",
        "wrappers": [
            {"name": "gcloud-config", "command": "gcloud", "args": ["config", "list"]},
        ],
    },
    {
        "name": "terraform",
        "description": "Terraform",
        "wrappers": [
            {"name": "tf-init", "command": "terraform", "args": ["init"], "aliases": ["tfi"]},
            {"name": "tf-plan", "command": "terraform", "args": ["plan"], "aliases": ["tfp"]},
            {"name": "tf-apply", "command": "terraform", "args": ["apply"], "aliases": ["tfa"]},
        ],
    },
]
