"""
Feuille de style embarquée dans chaque document généré.
Fixe : aucune ressource externe, le document se rend seul.
"""

PAGE_CSS = """
    body { 
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; 
      line-height: 1.6; 
      color: #333; 
      max-width: 800px; 
      margin: 2rem auto; 
      padding: 0 1rem; 
      background-color: #f9fafb;
    }
    h1, h2, h3, h4, h5, h6 { color: #111; }
    a { color: #007bff; text-decoration: none; }
    a:hover { text-decoration: underline; }
    img { border-radius: 8px; box-shadow: 0 4px 6px rgba(0,0,0,0.1); }
    hr { border: 0; height: 1px; background: #ddd; margin: 2rem 0; }
    .embed-container {
      position: relative;
      overflow: hidden;
      max-width: 100%;
      padding-bottom: 56.25%; /* 16:9 */
      height: 0;
      margin: 1rem 0;
    }
    .embed-container iframe,
    .embed-container object,
    .embed-container embed {
      position: absolute;
      top: 0;
      left: 0;
      width: 100%;
      height: 100%;
      border: 0;
      border-radius: 8px;
      box-shadow: 0 4px 6px rgba(0,0,0,0.1);
    }
  """.strip("\n")
