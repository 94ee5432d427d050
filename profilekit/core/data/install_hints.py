"""
Install hint registry — how to get a missing tool, per package manager.

Pure data, no logic. Keys are command names as looked up by the
availability cache; inner keys are package managers, with ``_default``
as the last resort (usually a download page).
"""

from __future__ import annotations

INSTALL_HINTS: dict[str, dict[str, str]] = {

    # ── Version control ─────────────────────────────────────────

    "git": {
        "scoop": "scoop install git",
        "winget": "winget install --id Git.Git -e",
        "brew": "brew install git",
        "apt": "sudo apt install git",
        "dnf": "sudo dnf install git",
        "pacman": "sudo pacman -S git",
    },
    "gh": {
        "scoop": "scoop install gh",
        "winget": "winget install --id GitHub.cli -e",
        "brew": "brew install gh",
        "apt": "sudo apt install gh",
        "dnf": "sudo dnf install gh",
        "pacman": "sudo pacman -S github-cli",
    },
    "lazygit": {
        "scoop": "scoop install lazygit",
        "brew": "brew install lazygit",
        "pacman": "sudo pacman -S lazygit",
        "_default": "go install github.com/jesseduffield/lazygit@latest",
    },

    # ── Containers ──────────────────────────────────────────────

    "docker": {
        "winget": "winget install --id Docker.DockerDesktop -e",
        "brew": "brew install --cask docker",
        "apt": "sudo apt install docker.io",
        "dnf": "sudo dnf install docker-ce",
        "pacman": "sudo pacman -S docker",
        "_default": "https://docs.docker.com/get-docker/",
    },
    "podman": {
        "scoop": "scoop install podman",
        "winget": "winget install --id RedHat.Podman -e",
        "brew": "brew install podman",
        "apt": "sudo apt install podman",
        "dnf": "sudo dnf install podman",
        "pacman": "sudo pacman -S podman",
    },
    "kubectl": {
        "scoop": "scoop install kubectl",
        "winget": "winget install --id Kubernetes.kubectl -e",
        "brew": "brew install kubectl",
        "apt": "sudo snap install kubectl --classic",
        "pacman": "sudo pacman -S kubectl",
        "_default": "https://kubernetes.io/docs/tasks/tools/",
    },
    "helm": {
        "scoop": "scoop install helm",
        "brew": "brew install helm",
        "apt": "sudo snap install helm --classic",
        "pacman": "sudo pacman -S helm",
    },

    # ── Language toolchains / package managers ──────────────────

    "node": {
        "scoop": "scoop install nodejs-lts",
        "winget": "winget install --id OpenJS.NodeJS.LTS -e",
        "brew": "brew install node",
        "apt": "sudo apt install nodejs",
        "dnf": "sudo dnf install nodejs",
        "pacman": "sudo pacman -S nodejs",
    },
    "npm": {
        "scoop": "scoop install nodejs-lts",
        "brew": "brew install node",
        "apt": "sudo apt install npm",
        "dnf": "sudo dnf install npm",
        "pacman": "sudo pacman -S npm",
    },
    "pnpm": {
        "scoop": "scoop install pnpm",
        "brew": "brew install pnpm",
        "_default": "npm install -g pnpm",
    },
    "yarn": {
        "scoop": "scoop install yarn",
        "brew": "brew install yarn",
        "_default": "npm install -g yarn",
    },
    "bun": {
        "scoop": "scoop install bun",
        "brew": "brew install oven-sh/bun/bun",
        "_default": "curl -fsSL https://bun.sh/install | bash",
    },
    "python": {
        "scoop": "scoop install python",
        "winget": "winget install --id Python.Python.3.12 -e",
        "brew": "brew install python",
        "apt": "sudo apt install python3",
        "dnf": "sudo dnf install python3",
        "pacman": "sudo pacman -S python",
    },
    "pip": {
        "apt": "sudo apt install python3-pip",
        "dnf": "sudo dnf install python3-pip",
        "pacman": "sudo pacman -S python-pip",
        "_default": "python -m ensurepip --upgrade",
    },
    "uv": {
        "scoop": "scoop install uv",
        "winget": "winget install --id astral-sh.uv -e",
        "brew": "brew install uv",
        "_default": "curl -LsSf https://astral.sh/uv/install.sh | sh",
    },
    "cargo": {
        "scoop": "scoop install rustup",
        "brew": "brew install rustup",
        "_default": "curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh",
    },
    "go": {
        "scoop": "scoop install go",
        "winget": "winget install --id GoLang.Go -e",
        "brew": "brew install go",
        "apt": "sudo apt install golang-go",
        "dnf": "sudo dnf install golang",
        "pacman": "sudo pacman -S go",
    },
    "dotnet": {
        "scoop": "scoop install dotnet-sdk",
        "winget": "winget install --id Microsoft.DotNet.SDK.8 -e",
        "brew": "brew install --cask dotnet-sdk",
        "_default": "https://dotnet.microsoft.com/download",
    },

    # ── Cloud CLIs ──────────────────────────────────────────────

    "aws": {
        "scoop": "scoop install aws",
        "winget": "winget install --id Amazon.AWSCLI -e",
        "brew": "brew install awscli",
        "_default": "https://aws.amazon.com/cli/",
    },
    "az": {
        "scoop": "scoop install azure-cli",
        "winget": "winget install --id Microsoft.AzureCLI -e",
        "brew": "brew install azure-cli",
        "_default": "https://learn.microsoft.com/cli/azure/install-azure-cli",
    },
    "gcloud": {
        "scoop": "scoop install gcloud",
        "brew": "brew install --cask google-cloud-sdk",
        "_default": "https://cloud.google.com/sdk/docs/install",
    },
    "terraform": {
        "scoop": "scoop install terraform",
        "winget": "winget install --id Hashicorp.Terraform -e",
        "brew": "brew install hashicorp/tap/terraform",
        "pacman": "sudo pacman -S terraform",
        "_default": "https://developer.hashicorp.com/terraform/install",
    },

    # ── Package managers themselves ─────────────────────────────

    "brew": {
        "_default": '/bin/bash -c "$(curl -fsSL https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"',
    },
    "scoop": {
        "_default": "irm get.scoop.sh | iex",
    },
}
