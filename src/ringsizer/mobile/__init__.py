"""
Ring Sizer Mobile - Cross-platform Kivy UI for ring size estimation.

This module provides a Kivy-based user interface that works on:
- Desktop (Windows, macOS, Linux)
- Mobile (Android, iOS)

The application lives in ``ringsizer.mobile.app``. It is not imported here
because importing ``kivy.core.window`` opens a window.
"""
