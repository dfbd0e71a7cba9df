"""Embedded JavaScript for the agent selection page.

Renders the injected agent list grouped by category, keeps the selection
in a single page-local state object, and rebuilds the prompt preview on
every change. The prompt layout mirrors ``prompt.generator.generate_prompt``,
including the task text typed into the "Your Task" box. Keyboard shortcuts:
Ctrl+D download, Ctrl+Shift+A select all, Ctrl+Shift+E deselect all, Ctrl+F
or "/" focus search, Escape clear search.
No external libraries -- vanilla ES6 only.

All dynamic text goes through ``textContent``; nothing from the scanned
files is inserted as HTML.
"""

from __future__ import annotations

PAGE_JS: str = r"""
(function(){
"use strict";
var AGENTS=window.__AGENTS_DATA__||[];
var PROJECT=window.__PROJECT_PATH__||"";
var state={selected:new Set(),query:"",task:""};

var listEl=document.getElementById("agent-list");
var promptEl=document.getElementById("prompt");
var totalsEl=document.getElementById("totals");
var searchEl=document.getElementById("search");
var taskEl=document.getElementById("user-prompt");
document.getElementById("project-path").textContent=PROJECT;

function el(tag,cls,txt){
  var e=document.createElement(tag);
  if(cls)e.className=cls;
  if(txt!==undefined&&txt!==null)e.textContent=String(txt);
  return e;
}

function stripFrontMatter(text){
  return text.replace(/^\ufeff?---[ \t]*\r?\n([\s\S]*?\r?\n)?---[ \t]*(\r?\n|$)/,"");
}

function matches(a,q){
  if(!q)return true;
  var hay=[a.name,a.description,a.category||"",(a.tags||[]).join(" ")]
    .join(" ").toLowerCase();
  return hay.indexOf(q)!==-1;
}

function selectedAgents(){
  return AGENTS.filter(function(a){return state.selected.has(a.id);});
}

function generatePrompt(agents,task){
  if(agents.length===0){
    return "# No agents selected\n\nPlease select at least one agent to generate a prompt.";
  }
  var sorted=agents.slice().sort(function(a,b){
    var ac=a.category==="core",bc=b.category==="core";
    if(ac!==bc)return ac?-1:1;
    return (a.category||"").localeCompare(b.category||"");
  });
  var L=["# Agent Instructions","","Generated with "+agents.length+" agent(s)","","---",""];
  sorted.forEach(function(a){
    L.push("## "+a.name,"","**Metadata:**");
    if(a.category)L.push("- Category: "+a.category);
    if(a.priority)L.push("- Priority: "+a.priority);
    if(a.tags&&a.tags.length)L.push("- Tags: "+a.tags.join(", "));
    L.push("- Path: "+a.filePath,"");
    L.push(stripFrontMatter(a.rawContent).trim(),"","---","");
  });
  L.push("# Your Task","",(task||"").trim()||"[Describe your task here]","");
  return L.join("\n");
}

function renderTotals(){
  var sel=selectedAgents();
  var tokens=sel.reduce(function(t,a){return t+(a.estimatedTokenCount||0);},0);
  totalsEl.textContent=sel.length+" / "+AGENTS.length+" selected · ~"+
    tokens.toLocaleString()+" tokens";
}

function renderList(){
  while(listEl.firstChild)listEl.removeChild(listEl.firstChild);
  var visible=AGENTS.filter(function(a){return matches(a,state.query);});
  if(visible.length===0){
    listEl.appendChild(el("div","empty-state",
      AGENTS.length?"No agents match the search.":"No agent files found."));
    return;
  }
  var current=null;
  visible.forEach(function(a){
    var cat=a.category||"uncategorized";
    if(cat!==current){current=cat;listEl.appendChild(el("div","category",cat));}
    var row=el("label","agent"+(state.selected.has(a.id)?" selected":""));
    var box=document.createElement("input");
    box.type="checkbox";box.checked=state.selected.has(a.id);
    box.addEventListener("change",function(){toggle(a.id);});
    var info=el("div");
    info.appendChild(el("div","name",a.name));
    info.appendChild(el("div","desc",a.description));
    var meta=el("div","meta");
    (a.tags||[]).forEach(function(t){meta.appendChild(el("span","tag",t));});
    meta.appendChild(document.createTextNode("~"+a.estimatedTokenCount+" tokens"));
    info.appendChild(meta);
    row.appendChild(box);row.appendChild(info);
    listEl.appendChild(row);
  });
}

function render(){
  renderList();renderTotals();
  promptEl.textContent=generatePrompt(selectedAgents(),state.task);
}

function toggle(id){
  if(state.selected.has(id))state.selected.delete(id);else state.selected.add(id);
  render();
}

function selectAll(){
  AGENTS.filter(function(a){return matches(a,state.query);})
    .forEach(function(a){state.selected.add(a.id);});
  render();
}

function selectNone(){
  state.selected.clear();render();
}

function copyPrompt(){
  if(navigator.clipboard){
    navigator.clipboard.writeText(promptEl.textContent).catch(function(err){
      console.error("Failed to copy to clipboard:",err);
    });
  }
}

function downloadPrompt(){
  var blob=new Blob([promptEl.textContent],{type:"text/markdown"});
  var url=URL.createObjectURL(blob);
  var a=document.createElement("a");
  a.href=url;a.download="agent-prompt.md";
  document.body.appendChild(a);a.click();document.body.removeChild(a);
  URL.revokeObjectURL(url);
}

function focusSearch(){
  searchEl.focus();searchEl.select();
}

// Ctrl also matches Cmd on macOS.
var SHORTCUTS=[
  {key:"d",shift:false,run:downloadPrompt},
  {key:"a",shift:true,run:selectAll},
  {key:"e",shift:true,run:selectNone},
  {key:"f",shift:false,run:focusSearch}
];

function shortcutFor(e){
  if(!(e.ctrlKey||e.metaKey)||e.altKey)return null;
  var key=(e.key||"").toLowerCase();
  for(var i=0;i<SHORTCUTS.length;i++){
    var s=SHORTCUTS[i];
    if(s.key===key&&s.shift===e.shiftKey)return s;
  }
  return null;
}

searchEl.addEventListener("input",function(){
  state.query=searchEl.value.trim().toLowerCase();renderList();
});
taskEl.addEventListener("input",function(){
  state.task=taskEl.value;
  promptEl.textContent=generatePrompt(selectedAgents(),state.task);
});
document.getElementById("select-all").addEventListener("click",selectAll);
document.getElementById("select-none").addEventListener("click",selectNone);
document.getElementById("copy").addEventListener("click",copyPrompt);
document.getElementById("download").addEventListener("click",downloadPrompt);
document.addEventListener("keydown",function(e){
  var shortcut=shortcutFor(e);
  if(shortcut){
    e.preventDefault();shortcut.run();
    return;
  }
  var typing=document.activeElement===searchEl||document.activeElement===taskEl;
  if(e.key==="/"&&!typing){
    e.preventDefault();focusSearch();
  }else if(e.key==="Escape"&&document.activeElement===searchEl){
    searchEl.value="";state.query="";searchEl.blur();renderList();
  }
});

render();
})();
"""
