"""
Documented hub commands whose behaviour lives outside this package.

Running any of these passes the command on to git; the descriptors only
supply the names, the native/extension split and the inline help text
shown by `hub help --plain-text`.
"""

from ..command_registry import CommandDescriptor


def _native(name: str, usage: str, long: str) -> CommandDescriptor:
    return CommandDescriptor(name=name, usage=usage, long=long)


def _extension(name: str, usage: str, long: str) -> CommandDescriptor:
    return CommandDescriptor(name=name, git_extension=True, usage=usage, long=long)


NATIVE_COMMANDS = (
    _native('api', "api [-it] [-X <METHOD>] [-H <HEADER>] [--cache <TTL>] <ENDPOINT> [-F <FIELD>|--input <FILE>]",
            "Low-level GitHub API request interface."),
    _native('browse', "browse [-uc] [[<USER>/]<REPOSITORY>|--] [<SUBPAGE>]",
            "Open a GitHub repository in a web browser."),
    _native('ci-status', "ci-status [-v] [<COMMIT>]",
            "Display status of GitHub checks for a commit."),
    _native('compare', "compare [-uc] [-b <BASE>]\ncompare [-uc] [<OWNER>] [<BASE>...]<HEAD>",
            "Open a GitHub compare page in a web browser."),
    _native('create', "create [-poc] [-d <DESCRIPTION>] [-h <HOMEPAGE>] [[<ORGANIZATION>/]<NAME>]",
            "Create a new repository on GitHub and add a git remote for it."),
    _native('delete', "delete [-y] [<ORGANIZATION>/]<NAME>",
            "Delete an existing repository on GitHub."),
    _native('fork', "fork [--no-remote] [--remote-name <REMOTE>] [--org <ORGANIZATION>]",
            "Fork the current repository on GitHub and add a git remote for it."),
    _native('gist', "gist create [-oc] [--public] [<FILE>...]\ngist [-o] <ID> [--no-headers] [<FILENAME>]",
            "Create and print GitHub Gists."),
    _native('issue', "issue [-a <ASSIGNEE>] [-c <CREATOR>] [-@ <USER>] [-s <STATE>] [-f <FORMAT>]\n"
                     "issue show [-f <FORMAT>] <NUMBER>\nissue create [-oc] [-m <MESSAGE>|-F <FILE>]",
            "Manage GitHub Issues for the current repository."),
    _native('pr', "pr list [-s <STATE>] [-h <HEAD>] [-b <BASE>] [-f <FORMAT>]\n"
                  "pr checkout <PR-NUMBER> [<BRANCH>]\npr show [-uc] [-f <FORMAT>] [<PR-NUMBER>]",
            "Manage GitHub Pull Requests for the current repository."),
    _native('pull-request', "pull-request [-focpd] [-b <BASE>] [-h <HEAD>] [-r <REVIEWERS> ] "
                            "[-a <ASSIGNEES>] [-M <MILESTONE>] [-l <LABELS>]",
            "Create a GitHub Pull Request."),
    _native('release', "release [--include-drafts] [--exclude-prereleases] [-L <LIMIT>] [-f <FORMAT>]\n"
                       "release show [-f <FORMAT>] <TAG>\nrelease create [-dpoc] [-a <FILE>] [-m <MESSAGE>|-F <FILE>] <TAG>",
            "Manage GitHub Releases for the current repository."),
    _native('sync', "sync [--color]",
            "Fetch git objects from upstream and update local branches."),
)

EXTENSION_COMMANDS = (
    _extension('alias', "alias [-s] [<SHELL>]",
               "Show shell instructions for wrapping git."),
    _extension('am', "am [-3] <GITHUB-URL>",
               "Replicate commits locally from a GitHub pull request."),
    _extension('apply', "apply <GITHUB-URL>",
               "Download a patch from GitHub and apply it locally."),
    _extension('checkout', "checkout <PULLREQ-URL> [<BRANCH>]",
               "Check out the head of a pull request in a new branch."),
    _extension('cherry-pick', "cherry-pick <GITHUB-REF>",
               "Cherry-pick a commit from a fork on GitHub."),
    _extension('clone', "clone [-p] [<OPTIONS>] [<USER>/]<REPOSITORY> [<DESTINATION>]",
               "Clone a repository from GitHub."),
    _extension('fetch', "fetch <USER>[,<USER2>...]",
               "Add missing remotes prior to performing git fetch."),
    _extension('init', "init -g",
               "Initialize a git repository and add a remote pointing to GitHub."),
    _extension('merge', "merge <PULLREQ-URL>",
               "Merge a pull request locally with a message like the GitHub Merge Button."),
    _extension('push', "push <REMOTE>[,<REMOTE2>...] [<REF>]",
               "Push a git branch to each of the listed remotes."),
    _extension('remote', "remote add [-p] [<OPTIONS>] <USER>[/<REPOSITORY>]\n"
                         "remote set-url [-p] [<OPTIONS>] <NAME> <USER>[/<REPOSITORY>]",
               "Add a git remote for a GitHub repository."),
    _extension('submodule', "submodule add [-p] [<OPTIONS>] [<USER>/]<REPOSITORY> <DESTINATION>",
               "Add a git submodule for a GitHub repository."),
)

CATALOG = NATIVE_COMMANDS + EXTENSION_COMMANDS
