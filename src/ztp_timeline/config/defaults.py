"""Default configuration values for ztp-timeline.

This module centralizes all hard-coded default values used throughout
the application, making them easy to discover and modify.
"""

# Hub access
DEFAULT_KUBECONFIG = (
    "/var/builds/telco-qe-preserved/"
    "ztp-hub-preserved-prod-cluster_profile_dir/hub-kubeconfig"
)
DEFAULT_OC_BINARY = "oc"
DEFAULT_SSH_BINARY = "ssh"
DEFAULT_CURL_BINARY = "curl"

# Where ZTP resources live on the hub
DEFAULT_GITOPS_NAMESPACES = ("openshift-gitops", "argocd")
DEFAULT_CGU_NAMESPACE = "ztp-install"
SITECONFIG_SOURCE_PATH = "siteconfig"
ZTP_DONE_LABEL = "ztp-done"

# Timeouts (seconds)
DEFAULT_PROVIDER_TIMEOUT_SECONDS = 30
DEFAULT_TOTAL_TIMEOUT_SECONDS = 120

# Validation ranges
PROVIDER_TIMEOUT_MIN = 1
PROVIDER_TIMEOUT_MAX = 600
TOTAL_TIMEOUT_MIN = 1
TOTAL_TIMEOUT_MAX = 3600
