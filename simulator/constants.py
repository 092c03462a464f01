# Settings file read at startup, relative to the working directory
CONFIG_FILE = "./config.yml"

# Host used for the kube-apiserver address when KubeApiHost is not set
DEFAULT_KUBE_API_HOST = "127.0.0.1"

# Scheduler configuration API
SCHEDULER_CONFIG_GROUP = "kubescheduler.config.k8s.io"
SCHEDULER_CONFIG_VERSION = "v1beta2"
SCHEDULER_CONFIG_API_VERSION = f"{SCHEDULER_CONFIG_GROUP}/{SCHEDULER_CONFIG_VERSION}"
SCHEDULER_CONFIG_KIND = "KubeSchedulerConfiguration"

DEFAULT_SCHEDULER_NAME = "default-scheduler"
