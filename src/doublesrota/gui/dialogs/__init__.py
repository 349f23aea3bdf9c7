from doublesrota.gui.dialogs.settings_dialog import SettingsDialog

__all__ = ["SettingsDialog"]
