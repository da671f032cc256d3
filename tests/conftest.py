"""Shared fixtures: a small Tailwind-like reference stylesheet."""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.tailwind_converter import clear_reference_cache
from tailwind.scales import clear_scale_cache

REFERENCE_CSS = r"""
*, ::before, ::after {
  box-sizing: border-box;
  border-width: 0;
  border-style: solid;
  border-color: #e2e8f0;
}

.container { width: 100%; }

.bg-transparent { background-color: transparent; }

.bg-white {
  --bg-opacity: 1;
  background-color: #fff;
  background-color: rgba(255, 255, 255, var(--bg-opacity));
}

.hover\:bg-transparent:hover { background-color: transparent; }

.hover\:bg-white:hover {
  --bg-opacity: 1;
  background-color: #fff;
  background-color: rgba(255, 255, 255, var(--bg-opacity));
}

.focus\:bg-white:focus { background-color: #fff; }

.border-gray-300 {
  --border-opacity: 1;
  border-color: #e2e8f0;
  border-color: rgba(226, 232, 240, var(--border-opacity));
}

.rounded-sm { border-radius: 0.125rem; }
.rounded { border-radius: 0.25rem; }
.rounded-full { border-radius: 9999px; }

.border-solid { border-style: solid; }
.border-0 { border-width: 0; }
.border { border-width: 1px; }
.border-b { border-bottom-width: 1px; }

.flex { display: flex; }
.hidden { display: none; }

.m-0 { margin: 0; }
.m-4 { margin: 1rem; }
.m-auto { margin: auto; }
.my-4 { margin-top: 1rem; margin-bottom: 1rem; }
.mx-4 { margin-left: 1rem; margin-right: 1rem; }
.mt-4 { margin-top: 1rem; }
.mr-4 { margin-right: 1rem; }
.mb-4 { margin-bottom: 1rem; }
.ml-4 { margin-left: 1rem; }
.mb-6 { margin-bottom: 1.5rem; }

.p-0 { padding: 0; }
.p-6 { padding: 1.5rem; }
.p-10 { padding: 2.5rem; }
.py-6 { padding-top: 1.5rem; padding-bottom: 1.5rem; }
.px-6 { padding-left: 1.5rem; padding-right: 1.5rem; }

.relative { position: relative; }

.text-white {
  --text-opacity: 1;
  color: #fff;
  color: rgba(255, 255, 255, var(--text-opacity));
}

.w-1\/2 { width: 50%; }
.w-2\/3 { width: 66.666667%; }
.w-full { width: 100%; }

.placeholder-gray-500::-moz-placeholder { color: #a0aec0; }
.placeholder-gray-500::placeholder { color: #a0aec0; }
.focus\:placeholder-gray-600:focus::placeholder { color: #718096; }

@keyframes spin {
  to { transform: rotate(360deg); }
}

@media (min-width: 640px) {
  .sm\:p-6 { padding: 1.5rem; }
}

@media (min-width: 1280px) {
  .xl\:p-10 { padding: 2.5rem; }
  .xl\:hover\:bg-white:hover { background-color: #fff; }
}
"""


@pytest.fixture
def reference_css():
    return REFERENCE_CSS


@pytest.fixture(autouse=True)
def fresh_caches():
    clear_scale_cache()
    clear_reference_cache()
    yield
    clear_scale_cache()
    clear_reference_cache()
