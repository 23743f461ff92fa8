"""
Example Sets
Named CSS samples for trying the converter from the CLI and the web page.
"""

from typing import Dict, List

BASIC_LAYOUT = """/* Basic layout */
.flex-container {
  display: flex;
  justify-content: space-between;
  align-items: center;
  gap: 16px;
  padding: 24px;
}

.grid-container {
  display: grid;
  grid-template-columns: repeat(3, 1fr);
  gap: 20px;
  min-height: 100vh;
}

.responsive-card {
  width: 100%;
  max-width: 400px;
  margin: 0 auto;
  background-color: white;
  border-radius: 8px;
  box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
}

.sticky-header {
  position: sticky;
  top: 0;
  z-index: 50;
  border-bottom: 1px solid #e5e7eb;
}

.square {
  width: 200px;
  height: 200px;
  aspect-ratio: 1 / 1;
}
"""

INTERACTIVE_STATES = """/* Interactive states */
.btn {
  background-color: #3b82f6;
  color: white;
  padding: 12px 24px;
  border-radius: 6px;
  transition: all 0.2s ease;
}

.btn:hover {
  background-color: #2563eb;
  transform: translateY(-2px);
}

.btn:focus {
  outline: 2px solid #3b82f6;
  outline-offset: 2px;
}

.btn:disabled {
  opacity: 0.5;
  cursor: not-allowed;
}

.input:focus-visible {
  border-color: blue;
}
"""

PSEUDO_ELEMENTS = """/* Pseudo-elements */
.tooltip {
  position: relative;
}

.tooltip::before {
  position: absolute;
  top: -8px;
  left: 50%;
  transform: translateX(-50%);
}

.quote::after {
  color: gray;
  margin-left: 4px;
}

.input::placeholder {
  color: #9ca3af;
  font-style: italic;
}

.list-item::marker {
  color: red;
}

.btn::before:hover {
  opacity: 1;
}
"""

COMPLEX_SELECTORS = """/* Complex selectors */
.row:nth-child(odd) {
  background-color: #f9fafb;
}

.row:nth-child(3n+1) {
  font-weight: 600;
}

.item:first-child:not(:last-child) {
  margin-bottom: 8px;
}

.card:has(img) {
  padding: 0;
}

.cell:nth-of-type(2) {
  text-align: center;
}
"""

ANIMATIONS = """/* Animations and transitions */
.fade {
  opacity: 0;
  transition: opacity 300ms ease-in-out;
}

.slide {
  transform: translateX(16px) scale(0.95);
  transition: transform 0.5s cubic-bezier(0.4, 0, 0.2, 1) 100ms;
}

.spin {
  transform: rotate(45deg);
}

.blurred {
  filter: blur(8px) grayscale(100%);
  backdrop-filter: blur(4px);
}
"""

UTILITY_CLASSES = """/* Utility classes */
.truncate {
  overflow: hidden;
  text-overflow: ellipsis;
  white-space: nowrap;
}

.sr-only {
  position: absolute;
  width: 1px;
  height: 1px;
  overflow: hidden;
}

.heading {
  font: italic 700 24px/1.5 Georgia, serif;
  letter-spacing: -0.025em;
  text-transform: uppercase;
}

.themed {
  padding: var(--space-4);
  fill: var(--brand-color);
}
"""

ENHANCED_CONVERSION = """/* Enhanced conversion */
.grid-fixed {
  grid-template-columns: 200px 200px 200px 200px;
  grid-template-rows: 100px 100px 100px;
}

.equal-cols {
  grid-template-columns: 1fr 1fr 1fr 1fr 1fr;
}

.centered-different-values {
  margin: 16px auto 24px;
}

.centered-complex {
  margin: 8px auto 12px auto;
}

.enhanced-card {
  opacity: 0.9;
  transform: scale(1.05);
  z-index: 10;
  background-color: rgba(255, 255, 255, 0.8);
}

.video {
  aspect-ratio: 16 / 9;
  accent-color: yellow;
}
"""

EXAMPLE_SETS: Dict[str, str] = {
    'Basic Layout': BASIC_LAYOUT,
    'Interactive States': INTERACTIVE_STATES,
    'Pseudo-elements': PSEUDO_ELEMENTS,
    'Complex Selectors': COMPLEX_SELECTORS,
    'Animations': ANIMATIONS,
    'Utility Classes': UTILITY_CLASSES,
    'Enhanced Conversion': ENHANCED_CONVERSION,
}


def list_example_sets() -> List[str]:
    return list(EXAMPLE_SETS)


def get_example_set(name: str) -> str:
    """Look up a set by name, ignoring case. Raises KeyError if unknown."""
    for key, css in EXAMPLE_SETS.items():
        if key.lower() == name.strip().lower():
            return css
    raise KeyError(name)
