"""Custom CSS styling for One Path Gradio UI"""

custom_css = """
/* ============================================
   ONE PATH THEME
   Dark, focused, study-friendly UI
   ============================================ */

/* ROOT VARIABLES */
:root {
    --bg-primary: #0a0a0a;
    --bg-secondary: #141414;
    --bg-tertiary: #1e1e1e;
    --border-color: #333333;
    --text-primary: #f5f5f5;
    --text-secondary: #a0a0a0;
    --text-muted: #666666;
    --accent-blue: #3b82f6;
    --accent-blue-hover: #60a5fa;
    --accent-red: #ef4444;
    --accent-amber: #f59e0b;
    --accent-green: #22c55e;
    --radius-sm: 8px;
    --radius-md: 12px;
    --radius-lg: 16px;
}

.gradio-container {
    max-width: 1280px !important;
    width: 100% !important;
    margin: 0 auto !important;
    font-family: -apple-system, BlinkMacSystemFont, 'SF Pro Display', 'Segoe UI', sans-serif !important;
    background: var(--bg-primary) !important;
    color: var(--text-primary) !important;
}

footer { visibility: hidden !important; }

/* TYPOGRAPHY */
h1, h2, h3, h4, h5, h6 { color: var(--text-primary) !important; font-weight: 600 !important; }
p, span, label, div { color: var(--text-primary) !important; }
a { color: var(--accent-blue) !important; text-decoration: none !important; }
a:hover { text-decoration: underline !important; }

/* LANDING */
#landing-view { max-width: 900px !important; margin: 40px auto !important; text-align: center !important; }
#landing-title h1 { font-size: 56px !important; letter-spacing: 4px !important; }
#landing-title strong { color: var(--accent-blue) !important; }
#error-message {
    background: rgba(239, 68, 68, 0.1) !important;
    border: 1px solid var(--accent-red) !important;
    border-radius: var(--radius-md) !important;
    padding: 12px 16px !important;
}

/* BUTTONS */
button {
    border-radius: var(--radius-sm) !important;
    font-weight: 500 !important;
    transition: all 0.2s ease !important;
}

.primary { background: var(--accent-blue) !important; color: white !important; }
.primary:hover { background: var(--accent-blue-hover) !important; transform: translateY(-1px) !important; }
.stop { background: var(--accent-red) !important; color: white !important; }
button:disabled { opacity: 0.45 !important; transform: none !important; }

/* TABS */
button[role="tab"] {
    color: var(--text-secondary) !important;
    border: none !important;
    border-bottom: 2px solid transparent !important;
    background: transparent !important;
    padding: 12px 20px !important;
    font-size: 15px !important;
}

button[role="tab"][aria-selected="true"] {
    color: var(--text-primary) !important;
    border-bottom: 2px solid var(--accent-blue) !important;
}

/* FILE UPLOAD */
.file-preview, [data-testid="file-upload"] {
    background: var(--bg-tertiary) !important;
    border: 2px dashed var(--border-color) !important;
    border-radius: var(--radius-md) !important;
}

.file-preview:hover { border-color: var(--accent-blue) !important; }

/* ANALYSIS AND ROADMAP */
#analysis-view blockquote, #roadmap-view blockquote {
    background: var(--bg-tertiary) !important;
    border-left: 3px solid var(--accent-blue) !important;
    border-radius: var(--radius-sm) !important;
    padding: 8px 12px !important;
}

#roadmap-view code {
    background: rgba(59, 130, 246, 0.15) !important;
    color: var(--accent-blue-hover) !important;
    padding: 2px 6px !important;
    border-radius: 4px !important;
}

/* STUDY AREA */
.study-sidebar {
    background: var(--bg-secondary) !important;
    border: 1px solid var(--border-color) !important;
    border-radius: var(--radius-lg) !important;
    padding: 16px !important;
}

.study-sidebar h2 { font-size: 13px !important; letter-spacing: 2px !important; color: var(--text-secondary) !important; }

.classmate-message, .future-message, .ai-message {
    background: var(--bg-tertiary) !important;
    border: 1px solid var(--border-color) !important;
    border-radius: var(--radius-md) !important;
    padding: 12px 16px !important;
}

.resource-embed {
    background: var(--bg-secondary);
    border: 1px solid var(--border-color);
    border-radius: var(--radius-md);
    margin: 12px 0;
    overflow: hidden;
}

.resource-embed-header { padding: 10px 16px; font-weight: 600; border-bottom: 1px solid var(--border-color); }
.resource-link { padding: 1rem; }

.video-container { position: relative; padding-bottom: 56.25%; height: 0; }
.video-container iframe { position: absolute; top: 0; left: 0; width: 100%; height: 100%; }

.study-nav { align-items: center !important; }
.study-position { text-align: center !important; }

/* PROGRESS BAR */
.progress-bar-container { margin-top: 16px; }
.progress-bar-label { font-size: 13px; color: var(--text-secondary) !important; margin-bottom: 6px; }
.progress-bar-bg { background: var(--bg-tertiary); border-radius: var(--radius-sm); height: 10px; overflow: hidden; }
.progress-bar-fg { background: var(--accent-green); height: 100%; transition: width 0.3s ease; }
.progress-bar-value { font-size: 12px; text-align: right; margin-top: 4px; }
"""
