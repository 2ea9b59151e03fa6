from .step_10_install_package import InstallPackageStep
from .step_20_backup_config import BackupConfigStep
from .step_30_fetch_config import FetchConfigStep
from .step_60_restore_backup import RestoreBackupStep
from .step_70_uninstall_package import UninstallPackageStep

__all__ = [
    "InstallPackageStep",
    "BackupConfigStep",
    "FetchConfigStep",
    "RestoreBackupStep",
    "UninstallPackageStep",
]
