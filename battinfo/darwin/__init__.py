"""Reserved for macOS support; it holds no backend."""